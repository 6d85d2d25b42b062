"""
Integration Tests - End-to-End Filtering Scenarios.
"""
