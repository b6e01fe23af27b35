"""
Test suite for cslist

Contains:
- tests/unit/          : Unit tests for grammar, element contract, wrappers,
                         pydantic integration and wire contracts
"""
