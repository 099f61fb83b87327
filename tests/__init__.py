"""Test suite for deck2outline.

Tests are organized to mirror the source code structure.

Running Tests:
    pytest                                  # Run all tests
    pytest -v                               # Verbose output
    pytest tests/processing/test_outline.py # Run specific file
    pytest -k "header"                      # Run tests with matching pattern in function name

Coverage:
    pytest --cov=deck2outline --cov-report=html
"""
