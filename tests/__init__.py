"""
Test Suite
==========

Test suite matching the htmlcsstoimage/ package structure.

Test Categories:
- unit: Unit tests for individual components
"""
