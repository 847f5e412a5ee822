"""Frequent-flyer number validator adapters.

Implementations of FrequentFlyerNumberValidatorPort:
- Pattern (regex check, optional member registry in detailed mode)
"""
