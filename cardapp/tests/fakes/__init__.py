"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeFrequentFlyerNumberValidator: Configurable results, recorded lookups
- FakeFraudCheckPort: Configurable fraud verdicts, recorded checks
"""

from .fraud import FakeFraudCheckPort
from .validator import FakeFrequentFlyerNumberValidator

__all__ = [
    "FakeFraudCheckPort",
    "FakeFrequentFlyerNumberValidator",
]
