"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_entities.py: Product validation and immutability
    - test_attribute_criteria.py: Concrete criteria
    - test_composite_criteria.py: AND / OR / NOT composition
    - test_filter_engine.py: Filter engine behavior
    - test_criterion_registry.py: Named criterion factories
    - test_config_loader.py: Configuration loading/validation
    - test_screens.py: Screen compilation
"""
