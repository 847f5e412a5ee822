"""Default fraud check used when none is supplied."""

from .models import CreditCardApplication
from .ports import FraudCheckPort


class NoFraudRiskCheck(FraudCheckPort):
    """Reports no fraud risk for every application."""

    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        return False
