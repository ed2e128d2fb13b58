"""
Test suite for decimath

Contains:
- tests/unit/          : Unit tests for individual kernel modules
"""
