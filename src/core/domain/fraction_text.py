"""
Fraction Text — Строгий разбор текстового представления дроби

Грамматика:
    fraction ::= WS* '-'? DIGIT+ WS* ('/' WS* '-'? DIGIT+ WS*)?
    WS       ::= только пробел

Запрещено: разделители тысяч, десятичная точка, двойной знак,
пробел между знаком и цифрами, более одной косой черты.
"""

import re
from typing import Final

from src.core.math.errors import FractionDivisionByZero, FractionFormatError
from src.core.math.integer_bounds import narrow_int32

# Целое: необязательный минус и ASCII-цифры без пробелов внутри
FRACTION_TEXT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r" *(?P<numerator>-?[0-9]+) *(?:/ *(?P<denominator>-?[0-9]+) *)?"
)


def parse_fraction_text(text: str) -> tuple[int, int]:
    """
    Разбор строки в пару (числитель, знаменатель) без нормализации.

    Отсутствующий знаменатель равен 1. Оба значения проверяются
    на попадание в Int32 до нормализации.

    Args:
        text: Строка вида "5", " -3 ", "8/-12", "  121 /  22 "

    Returns:
        (numerator, denominator) в пределах Int32, знаменатель ненулевой

    Raises:
        TypeError: Если text не str
        FractionFormatError: Если строка не соответствует грамматике
        FractionOverflow: Если числитель или знаменатель вне Int32
        FractionDivisionByZero: Если знаменатель равен 0

    Examples:
        >>> parse_fraction_text("8/-12")
        (8, -12)
        >>> parse_fraction_text("  42 ")
        (42, 1)
    """
    if not isinstance(text, str):
        raise TypeError(f"fraction text must be a str, got {type(text).__name__}")

    match = FRACTION_TEXT_PATTERN.fullmatch(text)
    if match is None:
        raise FractionFormatError(
            f"Invalid fraction {text!r}: expected one integer, or two integers separated "
            f"by a '/' (e.g. \"2/4\"). Integers must not contain thousands separators."
        )

    numerator = narrow_int32(int(match.group("numerator")), "numerator")

    raw_denominator = match.group("denominator")
    denominator = 1 if raw_denominator is None else narrow_int32(int(raw_denominator), "denominator")

    if denominator == 0:
        raise FractionDivisionByZero(f"Denominator cannot be zero in {text!r}")

    return numerator, denominator
