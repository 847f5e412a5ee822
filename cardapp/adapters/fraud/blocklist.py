"""Blocklist fraud check.

Implements FraudCheckPort by flagging applications whose
frequent-flyer number is on a known-bad list.
"""

import logging
from collections.abc import Iterable

from cardapp.core.models import CreditCardApplication
from cardapp.core.ports import FraudCheckPort

logger = logging.getLogger(__name__)


class BlocklistFraudCheck(FraudCheckPort):
    """Flags applications that reuse a blocklisted frequent-flyer number."""

    def __init__(self, blocked_numbers: Iterable[str]):
        """Initialize the fraud check.

        Args:
            blocked_numbers: Frequent-flyer numbers to treat as fraud risk.
                Matching ignores case and surrounding whitespace.
        """
        self.blocked_numbers = frozenset(
            self._normalize(number) for number in blocked_numbers
        )

    @staticmethod
    def _normalize(number: str) -> str:
        return number.strip().casefold()

    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        if application.frequent_flyer_number is None:
            return False

        if self._normalize(application.frequent_flyer_number) in self.blocked_numbers:
            logger.info(
                f"Frequent flyer number {application.frequent_flyer_number!r} is blocklisted"
            )
            return True
        return False
