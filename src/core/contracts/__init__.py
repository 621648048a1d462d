"""
Contract Validation Module

Модуль для валидации JSON контрактов, поставляемых вместе с пакетом.
"""

from .validators import (
    ContractValidator,
    GradeSheetValidator,
    SchemaLoader,
    validate_grade_sheet,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GradeSheetValidator",
    # Functions
    "validate_grade_sheet",
]
