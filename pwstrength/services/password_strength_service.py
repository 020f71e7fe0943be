"""
Password strength business logic.

Binds a password policy to the analyzer and reports which
requirements a password fails.
"""

import logging
from typing import Optional

from pwstrength.core.password_strength import PasswordAnalyzer, password_analyzer
from pwstrength.schemas.password_policy import PasswordPolicy, PasswordStrengthReport

logger = logging.getLogger(__name__)


class PasswordStrengthService:
    """Service class for evaluating passwords against a policy."""

    def __init__(
        self,
        policy: Optional[PasswordPolicy] = None,
        analyzer: Optional[PasswordAnalyzer] = None,
    ):
        self.policy = policy or PasswordPolicy.from_settings()
        self.analyzer = analyzer or password_analyzer

    def evaluate(self, password: Optional[str]) -> PasswordStrengthReport:
        """
        Evaluate a password against the policy.

        Args:
            password: Password to evaluate

        Returns:
            Report with both metrics, the verdict and any violations
        """
        if not password:
            return PasswordStrengthReport(
                repetition_count=0,
                sequence_length=0,
                permissible=False,
                violations=["Password must not be empty"],
            )

        repetition = self.analyzer.max_repetition_count(password)
        sequence = self.analyzer.max_sequence_length(password)
        violations = []

        limit = self.policy.max_allowed_repetition_count
        if repetition > limit:
            violations.append(
                f"Password repeats a character more than {limit} times"
            )

        limit = self.policy.max_allowed_sequence_length
        if sequence > limit:
            violations.append(
                f"Password contains a sequence longer than {limit} characters"
            )

        if violations:
            logger.info(f"Password rejected with {len(violations)} violation(s)")

        return PasswordStrengthReport(
            repetition_count=repetition,
            sequence_length=sequence,
            permissible=not violations,
            violations=violations,
        )

    def is_permissible(self, password: Optional[str]) -> bool:
        """Check whether a password satisfies the policy."""
        return self.analyzer.is_permissible(
            password,
            self.policy.max_allowed_repetition_count,
            self.policy.max_allowed_sequence_length,
        )
