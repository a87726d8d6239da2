"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_validation_result.py: Result accumulation and rendering
    - test_rules.py: Rule primitives and parse rules
    - test_date_range.py: Range bounds and containment
    - test_between_dates_selection.py: Range-bounded selection
    - test_swift_code.py: SWIFT/BIC decomposition
    - test_config_loader.py: Configuration loading/validation
"""
