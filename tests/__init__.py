"""
Test suite for the conversion core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
