"""Core utilities shared across tables and runtime layers.

This package provides foundational utilities that both the tables layer
(name registry, locale tables) and the runtime layer (binding, resolution)
depend on. By isolating these utilities here, we maintain a clean dependency
graph:

    core <- tables <- runtime

Exports:
    IndirectionGuard: Pass counter for bounded reference expansion
    is_name_char: Character test for the [a-z_0-9] name alphabet
    is_valid_name: Complete-string name validation
    search_name_end: Greedy name scan used by the resolver

Python 3.13+.
"""

from .indirection_guard import IndirectionGuard
from .name_validation import is_name_char, is_valid_name, search_name_end

__all__ = ["IndirectionGuard", "is_name_char", "is_valid_name", "search_name_end"]
