"""Fraud check adapters.

Implementations of FraudCheckPort:
- Blocklist (flag known bad frequent-flyer numbers)
"""
