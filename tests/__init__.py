"""
Test suite for int32-fractions

Contains:
- tests/unit/          : Unit tests for individual modules
"""
