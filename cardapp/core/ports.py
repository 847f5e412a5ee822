"""Port interfaces for the credit card application evaluator.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package; in-memory fakes live in tests/fakes/.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - FrequentFlyerNumberValidatorPort: Number validity, license status, lookup mode
   - FraudCheckPort: Independent fraud screening of an application

2. **Driving Ports** (adapters/external systems call into core)
   - EvaluationPort: Entry point for evaluating an application
"""

from abc import ABC, abstractmethod

from .models import (
    CreditCardApplication,
    CreditCardApplicationDecision,
    ValidationMode,
)


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class FrequentFlyerNumberValidatorPort(ABC):
    """Port for checking frequent-flyer numbers against an external service.

    Implementations must handle:
    - A missing number (None) without raising
    - Remembering the last validation mode that was set
    """

    @abstractmethod
    def is_valid(self, frequent_flyer_number: str | None) -> bool:
        """Check whether a frequent-flyer number is valid.

        Args:
            frequent_flyer_number: Identifier supplied by the applicant.
                May be None when the applicant did not provide one.

        Returns:
            True if the number is valid, False otherwise.

        Raises:
            Exception: If the backing service cannot answer. Callers
                treat this as inconclusive, not as "invalid".
        """

    @abstractmethod
    def get_license_status(self) -> str | None:
        """Return the license status of the backing validation service.

        Returns:
            Status string. Only "OK" means the license is active;
            any other value, including None, means inactive.
        """

    @property
    @abstractmethod
    def validation_mode(self) -> ValidationMode:
        """Current lookup mode."""

    @validation_mode.setter
    @abstractmethod
    def validation_mode(self, mode: ValidationMode) -> None:
        """Switch the lookup mode used by subsequent is_valid calls."""


class FraudCheckPort(ABC):
    """Port for screening applications for fraud risk.

    A fraud risk overrides every other rule in the evaluator.
    """

    @abstractmethod
    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        """Decide whether an application looks fraudulent.

        Args:
            application: The application under evaluation.

        Returns:
            True if the application should be referred as a fraud risk.

        Raises:
            Exception: If the check cannot be performed. The evaluator
                resolves this according to its failure policy.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class EvaluationPort(ABC):
    """Port for evaluating credit card applications.

    Called by the CLI and by any other entry point that needs a decision.
    """

    @abstractmethod
    def evaluate(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision:
        """Produce a decision for a single application.

        Never raises because of a collaborator failure; such failures
        degrade the decision to a human referral.
        """

    @property
    @abstractmethod
    def lookup_count(self) -> int:
        """Number of completed frequent-flyer lookups so far."""
