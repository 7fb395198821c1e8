"""
Test suite for casefold-compare

Contains:
- tests/unit/          : Unit tests for individual modules and the public API
"""
