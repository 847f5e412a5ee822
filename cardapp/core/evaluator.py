"""Decision procedure for credit card applications.

This module implements the business rules that decide whether an
application is accepted, declined, or referred to a human, and in
what order those rules apply.
"""

import logging
import threading
from collections.abc import Callable

from .fraud import NoFraudRiskCheck
from .models import (
    CreditCardApplication,
    CreditCardApplicationDecision,
    EvaluationRules,
    FraudCheckFailurePolicy,
    ValidationMode,
    is_license_active,
)
from .ports import EvaluationPort, FraudCheckPort, FrequentFlyerNumberValidatorPort

logger = logging.getLogger(__name__)

# Called with (frequent_flyer_number, is_valid) after each completed lookup
LookupObserver = Callable[[str | None, bool], None]


class CreditCardApplicationEvaluator(EvaluationPort):
    """Decides what happens to each credit card application.

    Uses ports but contains no adapter-specific logic. Rules are applied
    in a fixed order and the first one that matches wins:

    1. Fraud risk → referred as fraud risk
    2. High income → auto-accepted
    3. Under adult age → referred
    4. Inactive validator license → referred
    5. Older applicant → validator switched to detailed mode
    6. Frequent-flyer lookup:
       invalid or failed → referred,
       valid with low income → auto-declined,
       valid otherwise → referred

    Collaborator failures never escape evaluate(). Calls are serialized
    by a per-instance lock.
    """

    def __init__(
        self,
        validator: FrequentFlyerNumberValidatorPort,
        fraud_check: FraudCheckPort | None = None,
        rules: EvaluationRules | None = None,
        fraud_failure_policy: FraudCheckFailurePolicy = FraudCheckFailurePolicy.REFER,
        on_lookup: LookupObserver | None = None,
    ):
        self.validator = validator
        self.fraud_check = fraud_check if fraud_check is not None else NoFraudRiskCheck()
        self.rules = rules if rules is not None else EvaluationRules()
        self.fraud_failure_policy = fraud_failure_policy
        self.on_lookup = on_lookup
        self._lookup_count = 0
        self._lock = threading.Lock()

    @property
    def lookup_count(self) -> int:
        """Number of completed frequent-flyer lookups over this evaluator's lifetime."""
        return self._lookup_count

    def evaluate(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision:
        """Produce exactly one decision for the application.

        Side effects:
        - May set the validator's validation mode
        - May call the validator's is_valid
        - Increments lookup_count after a completed is_valid call
        """
        with self._lock:
            decision, rule = self._evaluate(application)
        logger.debug(
            f"Evaluated application (age={application.age}, "
            f"income={application.gross_annual_income}): {decision.value} by rule {rule}"
        )
        return decision

    def _evaluate(
        self, application: CreditCardApplication
    ) -> tuple[CreditCardApplicationDecision, str]:
        """Apply the decision rules in order, returning the decision and the rule name."""
        fraud_decision = self._check_fraud(application)
        if fraud_decision is not None:
            return fraud_decision, "fraud_screening"

        # Income rule overrides youth and validity checks
        if application.gross_annual_income >= self.rules.high_income_threshold:
            return CreditCardApplicationDecision.AUTO_ACCEPTED, "high_income"

        if application.age < self.rules.adult_age:
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN, "under_age"

        try:
            license_status = self.validator.get_license_status()
        except Exception as e:
            logger.warning(f"License status lookup failed: {e}", exc_info=True)
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN, "license_lookup_failed"

        if not is_license_active(license_status):
            logger.info(
                f"Validator license inactive (status={license_status!r}), referring application"
            )
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN, "license_inactive"

        if application.age >= self.rules.detailed_lookup_age:
            try:
                self.validator.validation_mode = ValidationMode.DETAILED
            except Exception as e:
                logger.warning(f"Failed to set detailed validation mode: {e}", exc_info=True)
                return CreditCardApplicationDecision.REFERRED_TO_HUMAN, "mode_change_failed"

        try:
            is_valid = bool(self.validator.is_valid(application.frequent_flyer_number))
        except Exception as e:
            logger.warning(
                f"Frequent flyer lookup failed for {application.frequent_flyer_number!r}: {e}",
                exc_info=True,
            )
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN, "lookup_failed"

        self._record_lookup(application.frequent_flyer_number, is_valid)

        if not is_valid:
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN, "invalid_number"

        if application.gross_annual_income < self.rules.low_income_threshold:
            return CreditCardApplicationDecision.AUTO_DECLINED, "low_income"

        return CreditCardApplicationDecision.REFERRED_TO_HUMAN, "manual_review"

    def _check_fraud(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision | None:
        """Return a decision if fraud screening settles the outcome, else None."""
        try:
            at_risk = self.fraud_check.is_fraud_risk(application)
        except Exception as e:
            logger.warning(
                f"Fraud check failed, applying {self.fraud_failure_policy.value} policy: {e}",
                exc_info=True,
            )
            if self.fraud_failure_policy == FraudCheckFailurePolicy.REFER_FRAUD_RISK:
                return CreditCardApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK
            if self.fraud_failure_policy == FraudCheckFailurePolicy.REFER:
                return CreditCardApplicationDecision.REFERRED_TO_HUMAN
            return None

        if at_risk:
            return CreditCardApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK
        return None

    def _record_lookup(self, frequent_flyer_number: str | None, is_valid: bool) -> None:
        """Count a completed lookup and notify the observer, if any."""
        self._lookup_count += 1

        if self.on_lookup is None:
            return
        try:
            self.on_lookup(frequent_flyer_number, is_valid)
        except Exception as e:
            # Observer failure must not change the decision
            logger.error(f"Lookup observer failed: {e}", exc_info=True)
