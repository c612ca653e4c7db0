"""
Test suite for dp-numerics

Contains:
- tests/unit/          : Unit tests for individual modules
"""
