"""Command-line interface adapters.

Provides CLI commands for the evaluator:
- evaluate: Decide a single application
- stats: Report how many frequent-flyer lookups were made
"""
