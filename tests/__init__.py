#!/usr/bin/env python3
"""
Test suite configuration.

All unit tests run without a database; repositories are exercised against
mocked SQLAlchemy sessions.

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v
"""
