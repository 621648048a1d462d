"""
Grade — Именованная оценка в виде дроби

Immutable Pydantic модель: имя студента и его оценка как Fraction.
Оценка может быть передана как Fraction или как строка "n/d".
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from src.core.contracts import validate_grade_sheet
from src.core.domain import Fraction
from src.core.math import FractionError


class Grade(BaseModel):
    """
    Оценка студента.

    Immutable модель (frozen=True). Сравнение оценок выполняется только
    через Fraction.compare_to.

    Любая ошибка разбора строки оценки (формат, переполнение, нулевой
    знаменатель) сообщается как pydantic.ValidationError с видом ошибки
    в тексте сообщения. Чтобы получить саму FractionError, используйте
    Fraction.parse до построения Grade.
    """

    name: str = Field(..., min_length=1, description="Имя студента")
    grade: Fraction = Field(..., description="Оценка (нормализованная дробь)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("grade", mode="before")
    @classmethod
    def parse_grade_text(cls, v: Any) -> Any:
        """Строка "n/d" разбирается строгой грамматикой дроби."""
        if isinstance(v, str):
            try:
                return Fraction.parse(v)
            except FractionError as e:
                raise ValueError(f"Invalid grade {v!r}: {e} ({e.kind.value})") from e
        return v

    def __str__(self) -> str:
        return f"{self.name}: {self.grade}"


def load_grade_sheet(data: Dict[str, Any]) -> List[Grade]:
    """
    Построение списка оценок из grade_sheet контракта.

    Сначала данные проверяются JSON Schema, затем каждая строка оценки
    разбирается в Fraction. Схема отклоняет всё, что не соответствует
    грамматике дроби (включая перевод строки), поэтому после неё
    возможны только ошибки диапазона и нулевого знаменателя.

    Args:
        data: {"grades": [{"name": ..., "grade": "n/d"}, ...]}

    Returns:
        Оценки в исходном порядке

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        FractionOverflow: Если числитель или знаменатель вне Int32
        FractionDivisionByZero: Если знаменатель оценки равен 0
    """
    validate_grade_sheet(data)
    return [
        Grade(name=entry["name"], grade=Fraction.parse(entry["grade"]))
        for entry in data["grades"]
    ]
