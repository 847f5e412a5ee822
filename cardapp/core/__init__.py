"""Core domain logic for the credit card application evaluator.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import (
    LICENSE_STATUS_ACTIVE,
    CreditCardApplication,
    CreditCardApplicationDecision,
    EvaluationRules,
    FraudCheckFailurePolicy,
    ValidationMode,
    is_license_active,
)

__all__ = [
    "LICENSE_STATUS_ACTIVE",
    "CreditCardApplication",
    "CreditCardApplicationDecision",
    "EvaluationRules",
    "FraudCheckFailurePolicy",
    "ValidationMode",
    "is_license_active",
]
