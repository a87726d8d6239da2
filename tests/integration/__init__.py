"""
Integration Tests - Components Working Together.

These tests exercise the construction protocol across value types:
raising factories, pydantic serialization, accumulate-mode merging and
config-driven parsing.
"""
