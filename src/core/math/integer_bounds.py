"""
Integer Bounds — Целочисленные примитивы фиксированной ширины

Модуль обеспечивает арифметику Fraction над Int32:
- Границы Int32 и проверка попадания в диапазон
- Сужение (narrowing) широкого промежуточного значения до Int32
- НОД по алгоритму Евклида (итеративно, по модулям)
- Нормализация пары (числитель, знаменатель) к каноническому виду

Промежуточные значения вычисляются в int Python (неограниченная ширина),
что покрывает требование "аккумулятор как минимум двойной ширины".
В каноническом хранилище значения всегда Int32.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После normalize_pair знаменатель > 0
2. После normalize_pair gcd(|n|, d) == 1, ноль всегда 0/1
3. Оба значения после normalize_pair помещаются в Int32
4. Нулевой знаменатель никогда не проходит нормализацию
"""

from typing import Final

from src.core.math.errors import FractionDivisionByZero, FractionOverflow

# =============================================================================
# ГРАНИЦЫ INT32
# =============================================================================

INT32_BITS: Final[int] = 32

# Минимальное значение Int32 (-2147483648); его модуль не представим в Int32
INT32_MIN: Final[int] = -(2 ** (INT32_BITS - 1))

# Максимальное значение Int32 (2147483647)
INT32_MAX: Final[int] = 2 ** (INT32_BITS - 1) - 1


# =============================================================================
# ПРОВЕРКА ДИАПАЗОНА И СУЖЕНИЕ
# =============================================================================


def is_strict_int(value: object) -> bool:
    """Проверка, что значение является int (bool и float не считаются целыми)."""
    return isinstance(value, int) and not isinstance(value, bool)


def fits_int32(value: int) -> bool:
    """
    Проверка, помещается ли значение в Int32.

    Examples:
        >>> fits_int32(2147483647)
        True
        >>> fits_int32(2147483648)
        False
        >>> fits_int32(-2147483648)
        True
    """
    return INT32_MIN <= value <= INT32_MAX


def narrow_int32(value: int, name: str = "value") -> int:
    """
    Сужение широкого значения до Int32.

    Args:
        value: Широкое промежуточное значение
        name: Имя значения (для сообщения об ошибке)

    Returns:
        value без изменений, если оно помещается в Int32

    Raises:
        FractionOverflow: Если value вне [INT32_MIN, INT32_MAX]
    """
    if not fits_int32(value):
        raise FractionOverflow(
            f"{name} {value} is not representable as a 32-bit signed integer "
            f"[{INT32_MIN}, {INT32_MAX}]"
        )
    return value


# =============================================================================
# НОД И НОРМАЛИЗАЦИЯ
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по алгоритму Евклида.

    Работает по модулям, поэтому знак аргументов и их порядок не важны.
    Пока оба числа ненулевые, большее заменяется остатком от деления
    на меньшее; когда одно обнуляется, второе и есть НОД.

    Args:
        a: Первое число (любого знака, любой ширины)
        b: Второе число (любого знака, любой ширины)

    Returns:
        НОД(|a|, |b|); gcd(0, n) = |n|, gcd(0, 0) = 0

    Examples:
        >>> gcd(-17, 119)
        17
        >>> gcd(1_048_576, -40_000_000)
        512
        >>> gcd(0, 7)
        7
    """
    larger = max(abs(a), abs(b))
    smaller = min(abs(a), abs(b))

    while smaller != 0:
        larger, smaller = smaller, larger % smaller

    return larger


def normalize_pair(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Нормализация пары (числитель, знаменатель) к каноническому виду.

    Алгоритм:
        1. Отрицательный знаменатель → меняем знак у обоих
        2. g = gcd(|n|, |d|)
        3. Делим оба на g
        4. Сужаем оба значения до Int32

    Вход может лежать вне Int32 (результат промежуточной арифметики);
    сокращение на НОД часто возвращает его в диапазон.

    Args:
        numerator: Числитель (любой ширины)
        denominator: Знаменатель (любой ширины, ненулевой)

    Returns:
        (numerator, denominator) в каноническом виде

    Raises:
        FractionDivisionByZero: Если denominator == 0
        FractionOverflow: Если сокращённая пара не помещается в Int32

    Examples:
        >>> normalize_pair(12, -8)
        (-3, 2)
        >>> normalize_pair(0, -5)
        (0, 1)
        >>> normalize_pair(6_440_648_040, 89_453_445)
        (72, 1)
    """
    if denominator == 0:
        raise FractionDivisionByZero(f"Denominator cannot be zero (numerator={numerator})")

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    divisor = gcd(numerator, denominator)
    reduced_numerator = numerator // divisor
    reduced_denominator = denominator // divisor

    if not (fits_int32(reduced_numerator) and fits_int32(reduced_denominator)):
        raise FractionOverflow(
            f"Fraction {reduced_numerator}/{reduced_denominator} is not representable "
            f"with 32-bit signed integers"
        )

    return reduced_numerator, reduced_denominator
