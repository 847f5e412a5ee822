"""External adapters for the credit card application evaluator.

This package provides implementations of the core port interfaces
and the outer surfaces that drive the evaluator.

Adapter Organization:

- validator/: Frequent-flyer number validators
- fraud/: Fraud screening checks
- cli/: Command-line interface commands
"""
