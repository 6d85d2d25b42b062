"""
Test Suite for Product Filter.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end scenarios and filter properties
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/product_filter         # With coverage
"""
