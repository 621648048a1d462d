"""
Fraction — Неизменяемая дробь с точной арифметикой над Int32

Immutable Pydantic модель рациональной дроби (numerator, denominator).

Три способа построения:
- Fraction(n, d): пара, нормализуется при создании
- Fraction(n) / Fraction.whole(n): целое, знаменатель 1
- Fraction("n/d") / Fraction.parse(text): строгий разбор строки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (для каждого живого экземпляра):
1. denominator > 0, знак всегда несёт числитель
2. gcd(|numerator|, denominator) == 1, ноль всегда 0/1
3. Оба поля помещаются в Int32
4. Экземпляр никогда не изменяется после создания (frozen=True)

Арифметика выполняется в int Python, затем результат сужается до Int32:
сначала напрямую, а если не помещается — после сокращения на НОД.
"""

import logging
from typing import Any, Final

from pydantic import BaseModel, Field, StrictInt, model_validator

from src.core.domain.fraction_text import parse_fraction_text
from src.core.math.errors import FractionDivisionByZero, FractionOverflow
from src.core.math.integer_bounds import (
    INT32_MAX,
    INT32_MIN,
    fits_int32,
    is_strict_int,
    normalize_pair,
)

logger = logging.getLogger(__name__)

# Маркер отсутствующего позиционного аргумента
_UNSET: Final = object()


class Fraction(BaseModel):
    """
    Рациональная дробь numerator/denominator в каноническом виде.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    Любой путь построения (включая model_validate/model_validate_json)
    проходит через нормализацию.
    """

    numerator: StrictInt = Field(..., ge=INT32_MIN, le=INT32_MAX, description="Числитель (несёт знак)")
    denominator: StrictInt = Field(..., gt=0, le=INT32_MAX, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True}  # Immutable

    def __init__(
        self,
        numerator: Any = _UNSET,
        denominator: Any = _UNSET,
        /,
        **data: Any,
    ) -> None:
        # model_validate/model_validate_json вызывают __init__ с именованными полями:
        # такие данные идут в pydantic без подстановки знаменателя и разбора строки
        if numerator is _UNSET:
            if denominator is not _UNSET:
                raise TypeError("Fraction denominator given without a numerator")
            super().__init__(**data)
            return
        if data:
            raise TypeError("Fraction accepts either positional values or field keywords, not both")

        if isinstance(numerator, str):
            if denominator is not _UNSET:
                raise TypeError("Fraction text cannot be combined with an explicit denominator")
            numerator, denominator = parse_fraction_text(numerator)
        elif denominator is _UNSET:
            denominator = 1
        super().__init__(numerator=numerator, denominator=denominator)

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        """
        Нормализация пары до проверки полей.

        Нецелые значения пропускаются без изменений: их отклонит StrictInt.

        Raises:
            FractionDivisionByZero: Если знаменатель равен 0
            FractionOverflow: Если сокращённая пара не помещается в Int32
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator")
        denominator = data.get("denominator")
        if not (is_strict_int(numerator) and is_strict_int(denominator)):
            return data

        numerator, denominator = normalize_pair(numerator, denominator)
        return {**data, "numerator": numerator, "denominator": denominator}

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def whole(cls, whole_number: int) -> "Fraction":
        """
        Целое число как дробь whole_number/1.

        Сокращение не требуется, но диапазон Int32 проверяется:
        int Python не ограничен по ширине.

        Raises:
            FractionOverflow: Если whole_number вне Int32
        """
        return cls(whole_number)

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """
        Разбор строки вида "n", "n/d" с пробелами вокруг целых.

        Raises:
            FractionFormatError: Если строка не соответствует грамматике
            FractionOverflow: Если числитель или знаменатель вне Int32
            FractionDivisionByZero: Если знаменатель равен 0
        """
        return cls(text)

    @classmethod
    def _from_wide(cls, numerator: int, denominator: int, operation: str) -> "Fraction":
        """
        Сужение широкого результата операции до Int32.

        Если оба значения уже помещаются в Int32, строим дробь напрямую.
        Иначе сначала сокращаем на НОД, затем сужаем.
        """
        if fits_int32(numerator) and fits_int32(denominator):
            return cls(numerator, denominator)

        logger.debug(
            "%s result %d/%d exceeds Int32, normalizing before narrowing",
            operation,
            numerator,
            denominator,
        )
        numerator, denominator = normalize_pair(numerator, denominator)
        return cls.model_construct(numerator=numerator, denominator=denominator)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Fraction") -> "Fraction":
        """a/b + c/d = (ad + bc)/bd"""
        other = _require_fraction(other)
        numerator = self.numerator * other.denominator + self.denominator * other.numerator
        denominator = self.denominator * other.denominator
        return self._from_wide(numerator, denominator, "add")

    def subtract(self, other: "Fraction") -> "Fraction":
        """a/b - c/d = (ad - bc)/bd"""
        other = _require_fraction(other)
        numerator = self.numerator * other.denominator - self.denominator * other.numerator
        denominator = self.denominator * other.denominator
        return self._from_wide(numerator, denominator, "subtract")

    def multiply(self, other: "Fraction") -> "Fraction":
        """(a/b) * (c/d) = ac/bd"""
        other = _require_fraction(other)
        numerator = self.numerator * other.numerator
        denominator = self.denominator * other.denominator
        return self._from_wide(numerator, denominator, "multiply")

    def divide(self, other: "Fraction") -> "Fraction":
        """
        (a/b) / (c/d) = ad/bc

        Нулевой делитель даёт нулевой знаменатель и отклоняется
        так же, как построение дроби с нулевым знаменателем.

        Raises:
            FractionDivisionByZero: Если other равен 0
        """
        other = _require_fraction(other)
        numerator = self.numerator * other.denominator
        denominator = self.denominator * other.numerator
        return self._from_wide(numerator, denominator, "divide")

    # -------------------------------------------------------------------------
    # Знак и обращение
    # -------------------------------------------------------------------------

    def abs(self) -> "Fraction":
        """
        Модуль дроби.

        Raises:
            FractionOverflow: Если числитель равен INT32_MIN
        """
        if self.numerator == INT32_MIN:
            raise FractionOverflow(
                f"Cannot represent the absolute value of {self}: "
                f"numerator is the 32-bit minimum value"
            )
        # Знаменатель не меняется и уже взаимно прост с числителем
        return self.model_construct(numerator=abs(self.numerator), denominator=self.denominator)

    def negate(self) -> "Fraction":
        """
        Дробь с тем же модулем и противоположным знаком.

        Raises:
            FractionOverflow: Если числитель равен INT32_MIN
        """
        if self.numerator == INT32_MIN:
            raise FractionOverflow(
                f"Cannot negate {self}: numerator is the 32-bit minimum value"
            )
        return self.model_construct(numerator=-self.numerator, denominator=self.denominator)

    def inverse(self) -> "Fraction":
        """
        Обратная дробь: a/b → b/a.

        Raises:
            FractionDivisionByZero: Если дробь равна 0
            FractionOverflow: Если числитель равен INT32_MIN
        """
        if self.numerator == 0:
            raise FractionDivisionByZero("Cannot invert zero")
        if self.numerator == INT32_MIN:
            raise FractionOverflow(
                f"Cannot invert {self}: numerator is the 32-bit minimum value"
            )
        return type(self)(self.denominator, self.numerator)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: "Fraction") -> int:
        """
        Сравнение через разность отношений в double.

        ВАЖНО: оба отношения переводятся в float независимо, поэтому для
        дробей с очень большими числителями и знаменателями округление
        может стереть истинную (крошечную) разницу. Для точного результата
        используйте compare_exact.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        other = _require_fraction(other)
        difference = self.numerator / self.denominator - other.numerator / other.denominator

        if difference > 0:
            return 1
        elif difference == 0:
            return 0
        else:
            return -1

    def compare_exact(self, other: "Fraction") -> int:
        """
        Точное сравнение перекрёстным умножением: sign(ad - bc).

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        other = _require_fraction(other)
        difference = self.numerator * other.denominator - other.numerator * self.denominator
        return (difference > 0) - (difference < 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        # Согласовано с __eq__: равные по compare_to дроби имеют равные double
        return hash(self.numerator / self.denominator)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare_to(other) >= 0

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "Fraction":
        return self.negate()

    def __abs__(self) -> "Fraction":
        return self.abs()

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Строка вида "n/d" без пробелов, либо "n" если знаменатель равен 1.

        Знак несёт только числитель.
        """
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.to_string()


def _require_fraction(value: object) -> Fraction:
    if not isinstance(value, Fraction):
        raise TypeError(f"Expected a Fraction operand, got {type(value).__name__}")
    return value
