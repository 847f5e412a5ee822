"""Pattern-based frequent-flyer number validator.

Implements FrequentFlyerNumberValidatorPort without any external
service: numbers are checked against a regular expression, and in
detailed mode against a registry of known member numbers.
"""

import logging
import re
from collections.abc import Iterable

from cardapp.core.models import LICENSE_STATUS_ACTIVE, ValidationMode
from cardapp.core.ports import FrequentFlyerNumberValidatorPort

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = r"[A-Za-z0-9]{1,20}"


class PatternFrequentFlyerValidator(FrequentFlyerNumberValidatorPort):
    """Validates frequent-flyer numbers by shape and, optionally, membership."""

    def __init__(
        self,
        pattern: str = DEFAULT_PATTERN,
        license_status: str | None = LICENSE_STATUS_ACTIVE,
        known_numbers: Iterable[str] | None = None,
        validation_mode: ValidationMode = ValidationMode.QUICK,
    ):
        """Initialize the validator.

        Args:
            pattern: Regular expression the whole number must match.
            license_status: Status reported by get_license_status().
            known_numbers: Member numbers accepted in detailed mode.
                If empty or None, detailed mode only checks the pattern.
            validation_mode: Initial lookup mode.

        Raises:
            re.error: If pattern is not a valid regular expression.
        """
        self.pattern = re.compile(pattern)
        self.license_status = license_status
        self.known_numbers = frozenset(known_numbers or ())
        self._validation_mode = validation_mode

    @property
    def validation_mode(self) -> ValidationMode:
        return self._validation_mode

    @validation_mode.setter
    def validation_mode(self, mode: ValidationMode) -> None:
        if not isinstance(mode, ValidationMode):
            raise TypeError(f"validation_mode must be a ValidationMode, got {mode!r}")
        logger.debug(f"Validation mode changed: {self._validation_mode.value} -> {mode.value}")
        self._validation_mode = mode

    def get_license_status(self) -> str | None:
        return self.license_status

    def is_valid(self, frequent_flyer_number: str | None) -> bool:
        """Check a number in the current validation mode."""
        if not frequent_flyer_number:
            return False

        if self.pattern.fullmatch(frequent_flyer_number) is None:
            return False

        if self._validation_mode == ValidationMode.DETAILED and self.known_numbers:
            return frequent_flyer_number in self.known_numbers

        return True
