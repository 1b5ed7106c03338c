"""
Test suite for fraction32

Contains:
- tests/unit/          : Unit tests for integer kernel, Fraction32 and contracts
"""
