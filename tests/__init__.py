"""
Test suite for cart price utilities

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Hypothesis property tests for pricing invariants
"""
