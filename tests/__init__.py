"""
Test suite for shop-catalog

Contains:
- tests/unit/          : Unit tests for individual modules and the demo scenario
"""
