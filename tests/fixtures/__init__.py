"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing
    - profiles/european.yaml: Profile overlay switching to day-first parsing
"""
