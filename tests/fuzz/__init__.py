"""Fuzz testing infrastructure for KeyTextEngine.

This package contains:
- test_texts_fuzz: Random name lists and cross-referencing tables through
  bind() and resolve_text_reference()

Python 3.13+.
"""
