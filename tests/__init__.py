"""
Test suite for strext

Contains:
- tests/unit/          : Unit tests for individual modules
"""
