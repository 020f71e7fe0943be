"""
Pydantic schemas for password policy evaluation.

Provides the threshold configuration object and the evaluation report.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pwstrength.core.config import Settings, get_settings


class PasswordPolicy(BaseModel):
    """Inclusive upper bounds for the password strength metrics."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "max_allowed_repetition_count": 2,
                "max_allowed_sequence_length": 3,
            }
        },
    )

    max_allowed_repetition_count: int = Field(
        ...,
        ge=0,
        description="Highest allowed number of occurrences of any one character",
        examples=[2],
    )
    max_allowed_sequence_length: int = Field(
        ...,
        ge=0,
        description="Highest allowed length of an ascending/descending run",
        examples=[3],
    )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PasswordPolicy":
        """Build the policy from application settings."""
        settings = settings or get_settings()
        return cls(
            max_allowed_repetition_count=settings.max_allowed_repetition_count,
            max_allowed_sequence_length=settings.max_allowed_sequence_length,
        )


class PasswordStrengthReport(BaseModel):
    """Result of evaluating a password against a policy."""

    repetition_count: int = Field(
        ..., ge=0, description="Occurrences of the most repeated character"
    )
    sequence_length: int = Field(
        ..., ge=0, description="Length of the longest alphanumeric run"
    )
    permissible: bool = Field(
        ..., description="Whether the password satisfies the policy"
    )
    violations: list[str] = Field(
        default_factory=list, description="Human-readable policy violations"
    )
