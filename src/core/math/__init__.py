"""
Core math modules

Целочисленные примитивы фиксированной ширины и виды ошибок точной арифметики.
"""

# Arithmetic errors
from src.core.math.errors import (
    FractionDivisionByZero,
    FractionError,
    FractionErrorKind,
    FractionFormatError,
    FractionOverflow,
)

# Integer bounds
from src.core.math.integer_bounds import (
    INT32_BITS,
    INT32_MAX,
    INT32_MIN,
    fits_int32,
    gcd,
    is_strict_int,
    narrow_int32,
    normalize_pair,
)

__all__ = [
    # Errors — Kinds
    "FractionErrorKind",
    # Errors — Exceptions
    "FractionError",
    "FractionDivisionByZero",
    "FractionOverflow",
    "FractionFormatError",
    # Integer bounds — Constants
    "INT32_BITS",
    "INT32_MAX",
    "INT32_MIN",
    # Integer bounds — Functions
    "fits_int32",
    "gcd",
    "is_strict_int",
    "narrow_int32",
    "normalize_pair",
]
