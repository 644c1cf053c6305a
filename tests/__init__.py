"""
Test suite for extrema

Contains:
- tests/unit/          : Unit tests for individual modules
"""
