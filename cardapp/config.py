"""Configuration loading for the credit card application evaluator.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

import re
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cardapp.core.models import EvaluationRules, FraudCheckFailurePolicy


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Decision thresholds
    high_income_threshold: float = Field(
        default=100_000,
        description="Gross annual income at or above which applications are auto-accepted",
    )
    adult_age: int = Field(
        default=21,
        description="Applicants younger than this are referred to a human",
    )
    detailed_lookup_age: int = Field(
        default=30,
        description="Applicants at or above this age get a detailed frequent-flyer lookup",
    )
    low_income_threshold: float = Field(
        default=20_000,
        description="Income below which applicants with a valid number are auto-declined",
    )

    # Fraud check configuration
    fraud_failure_policy: Literal["refer", "refer_fraud_risk", "ignore"] = Field(
        default="refer",
        description="Decision policy when the fraud check raises an error",
    )
    fraud_blocklist: list[str] = Field(
        default_factory=list,
        description="Frequent-flyer numbers treated as fraud risk",
    )

    # Validator configuration
    validator_license_status: str = Field(
        default="OK",
        description="License status reported by the pattern validator",
    )
    frequent_flyer_pattern: str = Field(
        default=r"[A-Za-z0-9]{1,20}",
        description="Regular expression a frequent-flyer number must fully match",
    )
    known_frequent_flyer_numbers: list[str] = Field(
        default_factory=list,
        description="Member numbers accepted by detailed lookups (empty disables the check)",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator(
        "high_income_threshold",
        "adult_age",
        "detailed_lookup_age",
        "low_income_threshold",
    )
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Ensure thresholds are non-negative."""
        if v < 0:
            raise ValueError("thresholds must be non-negative")
        return v

    @field_validator("frequent_flyer_pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Ensure the frequent-flyer pattern compiles."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"frequent_flyer_pattern is not a valid regex: {e}") from e
        return v

    @model_validator(mode="after")
    def validate_age_order(self) -> "Settings":
        """Ensure the adult age does not exceed the detailed lookup age."""
        if self.adult_age > self.detailed_lookup_age:
            raise ValueError("adult_age cannot exceed detailed_lookup_age")
        return self

    def to_rules(self) -> EvaluationRules:
        """Build the evaluator's decision thresholds."""
        return EvaluationRules(
            high_income_threshold=self.high_income_threshold,
            adult_age=self.adult_age,
            detailed_lookup_age=self.detailed_lookup_age,
            low_income_threshold=self.low_income_threshold,
        )

    def to_fraud_failure_policy(self) -> FraudCheckFailurePolicy:
        """Map the configured policy name onto the domain enum."""
        return FraudCheckFailurePolicy(self.fraud_failure_policy)


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
