"""
lingcheck Tests Package
=======================
Test suite for the checking pipeline and its components.

Run all tests: python3 -m pytest tests/lingcheck/ -v
Run specific: python3 -m pytest tests/lingcheck/test_rules.py -v
"""

__version__ = "1.0.0"
