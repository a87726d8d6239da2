"""
Test Suite for Validated Primitives.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Cross-component behaviour (construction protocol, config)
    - fixtures/: Shared sample configuration

Running Tests:
    pytest tests/                               # All tests
    pytest tests/unit/                          # Unit tests only
    pytest tests/integration/                   # Integration tests only
    pytest --cov=src/validated_primitives       # With coverage
"""
