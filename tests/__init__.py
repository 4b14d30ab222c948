"""
Test suite for utilkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
