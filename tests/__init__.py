"""
Test suite for closure-objects.

Test structure:
- unit/ - Unit tests, one module per source module

Run tests:
    pytest                    # All tests
    pytest tests/unit         # Unit tests only
    pytest -k "counter"       # Tests matching name
"""
