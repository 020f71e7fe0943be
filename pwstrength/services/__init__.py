"""
Business logic services for the application.

This module contains service classes that apply the password policy,
keeping callers free of threshold handling.
"""

from .password_strength_service import PasswordStrengthService

__all__ = ["PasswordStrengthService"]
