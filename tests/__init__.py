"""
Test suite for numeral-base

Contains:
- tests/unit/          : Unit tests for individual modules
"""
