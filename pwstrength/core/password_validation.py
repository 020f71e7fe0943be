"""
Password validation utilities.

Shared password strength validation for consistent requirements
wherever a password is accepted.
"""

from typing import Optional

from pwstrength.schemas.password_policy import PasswordPolicy
from pwstrength.services.password_strength_service import PasswordStrengthService


def validate_password_strength(
    password: Optional[str], policy: Optional[PasswordPolicy] = None
) -> str:
    """
    Validate password strength requirements.

    Requirements:
    - Not empty
    - No character repeated more than the allowed count
    - No ascending/descending run longer than the allowed length

    Args:
        password: Password to validate
        policy: Thresholds to apply (defaults to the configured policy)

    Returns:
        The password if valid

    Raises:
        ValueError: If password doesn't meet requirements
    """
    report = PasswordStrengthService(policy=policy).evaluate(password)
    if not report.permissible:
        raise ValueError(report.violations[0])

    return password
