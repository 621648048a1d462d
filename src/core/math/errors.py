"""
Arithmetic Errors — Виды ошибок точной дробной арифметики

Три вида отказа, которые может вернуть любая операция над Fraction:
- DIVISION_BY_ZERO: нулевой знаменатель или делитель
- INTEGER_OVERFLOW: результат не помещается в Int32 даже после сокращения
- INVALID_FORMAT: строка не соответствует грамматике дроби

Каждое исключение несёт поле `kind`, поэтому вызывающий код может
либо ловить конкретный класс, либо проверять вид ошибки.
"""

from enum import Enum


class FractionErrorKind(str, Enum):
    """Вид ошибки дробной арифметики"""

    DIVISION_BY_ZERO = "division_by_zero"
    INTEGER_OVERFLOW = "integer_overflow"
    INVALID_FORMAT = "invalid_format"


class FractionError(Exception):
    """
    Базовая ошибка построения или операции над Fraction.

    Ошибки детерминированы: одинаковые входы всегда дают одинаковый отказ.
    """

    kind: FractionErrorKind


class FractionDivisionByZero(FractionError, ZeroDivisionError):
    """Нулевой знаменатель при построении или нулевой делитель в операции."""

    kind = FractionErrorKind.DIVISION_BY_ZERO


class FractionOverflow(FractionError, OverflowError):
    """
    Результат не представим в Int32 даже после нормализации.

    Включает случай abs/negate/inverse для числителя, равного INT32_MIN.
    """

    kind = FractionErrorKind.INTEGER_OVERFLOW


class FractionFormatError(FractionError, ValueError):
    """Строка не соответствует грамматике дроби."""

    kind = FractionErrorKind.INVALID_FORMAT
