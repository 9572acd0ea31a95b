"""
Test Suite for Spreader Detector.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline and CLI tests
    - performance/: Timing checks over generated inputs
    - fixtures/: Shared sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m "not performance"             # Skip timing checks
"""
