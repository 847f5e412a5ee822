"""Domain models for the credit card application evaluator.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

import math
from dataclasses import dataclass
from enum import Enum

# The only license status value that counts as active
LICENSE_STATUS_ACTIVE = "OK"


@dataclass(frozen=True)
class CreditCardApplication:
    """A single credit card application as submitted by an applicant."""

    age: int = 0
    gross_annual_income: float = 0
    frequent_flyer_number: str | None = None

    def __post_init__(self) -> None:
        """Validate application invariants on creation."""
        if self.age < 0:
            raise ValueError(f"age must be non-negative, got {self.age}")
        if not math.isfinite(self.gross_annual_income):
            raise ValueError(
                f"gross_annual_income must be a finite number, got {self.gross_annual_income}"
            )
        if self.gross_annual_income < 0:
            raise ValueError(
                f"gross_annual_income must be non-negative, got {self.gross_annual_income}"
            )
        if self.frequent_flyer_number is not None and not isinstance(
            self.frequent_flyer_number, str
        ):
            raise TypeError(
                "frequent_flyer_number must be a string, "
                f"got {type(self.frequent_flyer_number).__name__}"
            )


class ValidationMode(Enum):
    """How thoroughly the validator checks a frequent-flyer number."""

    QUICK = "quick"
    DETAILED = "detailed"


class CreditCardApplicationDecision(Enum):
    """Outcome of a single evaluation.

    Every call to evaluate produces exactly one of these; there are no
    partial or pending states.
    """

    AUTO_ACCEPTED = "auto_accepted"
    AUTO_DECLINED = "auto_declined"
    REFERRED_TO_HUMAN = "referred_to_human"
    REFERRED_TO_HUMAN_FRAUD_RISK = "referred_to_human_fraud_risk"


class FraudCheckFailurePolicy(Enum):
    """What the evaluator decides when the fraud check itself fails.

    - REFER: degrade to a plain human referral
    - REFER_FRAUD_RISK: treat the failure as a fraud risk
    - IGNORE: treat the failure as "no risk" and keep evaluating
    """

    REFER = "refer"
    REFER_FRAUD_RISK = "refer_fraud_risk"
    IGNORE = "ignore"


@dataclass(frozen=True)
class EvaluationRules:
    """Thresholds used by the decision procedure."""

    high_income_threshold: float = 100_000
    adult_age: int = 21
    detailed_lookup_age: int = 30
    low_income_threshold: float = 20_000

    def __post_init__(self) -> None:
        """Validate threshold invariants on creation."""
        for name in (
            "high_income_threshold",
            "adult_age",
            "detailed_lookup_age",
            "low_income_threshold",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.adult_age > self.detailed_lookup_age:
            raise ValueError(
                f"adult_age ({self.adult_age}) cannot exceed "
                f"detailed_lookup_age ({self.detailed_lookup_age})"
            )


def is_license_active(status: str | None) -> bool:
    """Return True only for the literal active status."""
    return status == LICENSE_STATUS_ACTIVE
