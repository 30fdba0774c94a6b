"""
Test suite for rfm

Contains:
- tests/unit/      : Unit tests for individual modules
- tests/oracles.py : Reference implementations on Python int
"""
