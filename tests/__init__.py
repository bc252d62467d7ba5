"""
Test suite for exact-arith

Contains:
- tests/unit/          : Unit tests for individual modules
"""
