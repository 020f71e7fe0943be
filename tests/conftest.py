"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before any tests run.
"""

import os

# Set test environment variables BEFORE any package imports
os.environ["ENVIRONMENT"] = "testing"
os.environ["MAX_ALLOWED_REPETITION_COUNT"] = "3"
os.environ["MAX_ALLOWED_SEQUENCE_LENGTH"] = "3"

import pytest  # noqa: E402

from pwstrength.core.password_strength import PasswordAnalyzer  # noqa: E402
from pwstrength.schemas.password_policy import PasswordPolicy  # noqa: E402


@pytest.fixture
def analyzer():
    """Fresh analyzer instance."""
    return PasswordAnalyzer()


@pytest.fixture
def strict_policy():
    """Policy allowing each character twice and runs of up to three."""
    return PasswordPolicy(max_allowed_repetition_count=2, max_allowed_sequence_length=3)
