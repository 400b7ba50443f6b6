"""
Test suite for elemath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
