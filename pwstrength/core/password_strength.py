"""
Password strength analysis.

Computes the two strength metrics used by the password policy:

- Repetition count: occurrences of the most repeated character
  (case-sensitive). "Melbourne" -> 2, "Elephant" -> 1.
- Max sequence length: length of the longest ascending or descending
  run of adjacent letters or digits, compared case-insensitively.
  "password123" -> 3, "AbCdEf" -> 6, "ABC_DEF" -> 3.

All operations are pure and never raise for any password value.
"""

import logging
from collections import Counter
from enum import Enum
from typing import Optional

from pwstrength.schemas.password_policy import PasswordPolicy

logger = logging.getLogger(__name__)

# Counts above this are reported as 0
MAX_COUNT = 2**31 - 1


class Direction(Enum):
    """Direction of the run currently being scanned."""

    NONE = "none"
    ASCENDING = "ascending"
    DESCENDING = "descending"


def is_alphanumeric(c: Optional[str]) -> bool:
    """
    Check whether a single character is a letter or a decimal digit.

    Args:
        c: Character to check (None is accepted)

    Returns:
        False for None, empty or multi-character strings, punctuation,
        whitespace and symbols
    """
    if c is None or len(c) != 1:
        return False
    return c.isalpha() or c.isdecimal()


def _fold(c: str) -> int:
    lower = c.lower()
    # Simple case mapping: "İ" lowercases to "i" plus a combining dot
    return ord(lower[0])


def _step(previous: str, current: str) -> int:
    """Return +1/-1 when the pair ascends/descends by one position, else 0."""
    if not (is_alphanumeric(previous) and is_alphanumeric(current)):
        return 0
    diff = _fold(current) - _fold(previous)
    return diff if diff in (1, -1) else 0


class PasswordAnalyzer:
    """Stateless analyzer for password repetition and sequence metrics."""

    def max_repetition_count(self, password: Optional[str]) -> int:
        """
        Get the number of occurrences of the most repeated character.

        Args:
            password: Password to analyze

        Returns:
            Highest per-character count, or 0 for an empty password
        """
        if not password:
            logger.warning(
                "Null or empty password provided, returning 0 for repetition count"
            )
            return 0

        frequencies = Counter(password)
        highest = max(frequencies.values())

        if highest > MAX_COUNT:
            logger.error(
                f"Repetition count {highest} exceeds {MAX_COUNT}, returning 0"
            )
            return 0

        logger.debug(f"Max repetition count: {highest}")
        return highest

    def max_sequence_length(self, password: Optional[str]) -> int:
        """
        Get the length of the longest ascending/descending alphanumeric run.

        A character that does not extend a run on either side does not count
        as a sequence, so "1pass2word3" gives 0. A one-character password
        gives 1.

        Args:
            password: Password to analyze

        Returns:
            Longest run length, or 0 for an empty password
        """
        if not password:
            logger.warning(
                "Null or empty password provided, returning 0 for sequence length"
            )
            return 0

        if len(password) == 1:
            return 1

        longest = 0
        current_length = 1
        direction = Direction.NONE

        for previous, current in zip(password, password[1:]):
            step = _step(previous, current)

            # A reversal restarts the run at the turning character
            if step == 1:
                if direction is Direction.DESCENDING:
                    current_length = 1
                direction = Direction.ASCENDING
                current_length += 1
            elif step == -1:
                if direction is Direction.ASCENDING:
                    current_length = 1
                direction = Direction.DESCENDING
                current_length += 1
            else:
                if direction is not Direction.NONE:
                    longest = max(longest, current_length)
                current_length = 1
                direction = Direction.NONE

        # Run ending at the last character
        if direction is not Direction.NONE:
            longest = max(longest, current_length)

        logger.debug(f"Max sequence length: {longest}")
        return longest

    def is_permissible(
        self,
        password: Optional[str],
        max_allowed_repetition: int,
        max_allowed_sequence: int,
    ) -> bool:
        """
        Check a password against inclusive upper bounds for both metrics.

        Args:
            password: Password to check
            max_allowed_repetition: Highest allowed repetition count
            max_allowed_sequence: Highest allowed sequence length

        Returns:
            True if both metrics are within bounds, False otherwise
            (always False for an empty password)

        Raises:
            ValueError: If a threshold is negative
        """
        if max_allowed_repetition < 0 or max_allowed_sequence < 0:
            raise ValueError("Thresholds must be non-negative integers")

        if not password:
            return False

        repetition = self.max_repetition_count(password)
        sequence = self.max_sequence_length(password)
        return repetition <= max_allowed_repetition and sequence <= max_allowed_sequence


# Shared default instance
password_analyzer = PasswordAnalyzer()


def max_repetition_count(password: Optional[str]) -> int:
    """Module-level shortcut for PasswordAnalyzer.max_repetition_count."""
    return password_analyzer.max_repetition_count(password)


def max_sequence_length(password: Optional[str]) -> int:
    """Module-level shortcut for PasswordAnalyzer.max_sequence_length."""
    return password_analyzer.max_sequence_length(password)


def is_permissible(
    password: Optional[str],
    max_allowed_repetition: Optional[int] = None,
    max_allowed_sequence: Optional[int] = None,
    policy: Optional[PasswordPolicy] = None,
) -> bool:
    """
    Check a password against explicit thresholds, a policy, or the defaults.

    Explicit thresholds win over the policy; missing values fall back to the
    configured defaults.
    """
    if policy is None and (
        max_allowed_repetition is None or max_allowed_sequence is None
    ):
        policy = PasswordPolicy.from_settings()

    if max_allowed_repetition is None:
        max_allowed_repetition = policy.max_allowed_repetition_count
    if max_allowed_sequence is None:
        max_allowed_sequence = policy.max_allowed_sequence_length

    return password_analyzer.is_permissible(
        password, max_allowed_repetition, max_allowed_sequence
    )
