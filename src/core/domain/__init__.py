"""
Domain models and value objects.

Contains the Fraction value type and its text grammar.
"""

from src.core.domain.fraction import Fraction
from src.core.domain.fraction_text import FRACTION_TEXT_PATTERN, parse_fraction_text

__all__ = [
    # Fraction model
    "Fraction",
    # Text grammar
    "FRACTION_TEXT_PATTERN",
    "parse_fraction_text",
]
