"""
Test suite for the exact numeric core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
