"""
Test suite for the algebra capability library

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/unit/fixtures  : Shared conforming value types (DoublePair, Mod4, ...)
"""
