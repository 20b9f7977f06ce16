"""
Unit Tests for the Imbalance Engine

This package contains unit tests for the imbalance analyzers, the style
weighting, the explanation generator and the evaluator interface.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_pawns.py

    # Run with coverage
    pytest tests/ --cov=imbalance_engine --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
