"""
Test suite for Luhn mod N

Contains:
- tests/unit/          : Unit tests for individual modules
"""
