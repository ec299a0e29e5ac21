"""
Test suite for checked-arith

Contains:
- tests/unit/          : Unit tests for individual modules
"""
