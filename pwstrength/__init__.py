"""
Password strength analysis.

Repetition and sequence metrics for passwords, with a configurable
admissibility policy.
"""

from pwstrength.core.password_strength import (
    PasswordAnalyzer,
    is_alphanumeric,
    is_permissible,
    max_repetition_count,
    max_sequence_length,
    password_analyzer,
)
from pwstrength.schemas.password_policy import PasswordPolicy, PasswordStrengthReport

__all__ = [
    "PasswordAnalyzer",
    "PasswordPolicy",
    "PasswordStrengthReport",
    "is_alphanumeric",
    "is_permissible",
    "max_repetition_count",
    "max_sequence_length",
    "password_analyzer",
]
