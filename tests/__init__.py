"""
Test suite for the function catalogue and music disk collection

Contains:
- tests/unit/          : Unit tests for individual modules and the console session
"""
