"""
Test suite for cash_dispenser

Contains:
- tests/unit/          : Unit tests for domain models, selector, inventory, contracts
"""
