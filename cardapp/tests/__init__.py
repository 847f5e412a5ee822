"""Test suite for the credit card application evaluator.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses in-memory fakes and unittest.mock doubles for ports

2. adapters/: Tests for adapter implementations
   - Pattern validator, blocklist fraud check

3. fakes/: Port implementations for testing
   - In-memory implementations of the validator and fraud check ports
   - Used by core unit tests
"""
