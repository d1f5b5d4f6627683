"""
Core domain models, arithmetic primitives, and invariants.

This module contains the foundational building blocks of numeral conversion
that are independent of any host framework (alphabets, configuration,
arithmetic backends, integer and fraction conversion).
"""
