"""
Test suite for the ordering framework

Contains:
- tests/unit/          : Unit tests for individual modules
"""
