"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks: fixed-width integer
arithmetic, the immutable Fraction value type, and JSON contracts.
"""
