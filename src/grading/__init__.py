"""Grading — ранжирование именованных оценок-дробей.

- Grade: имя и оценка как Fraction
- best_grade: все оценки, равные максимальной
- load_grade_sheet: оценки из JSON контракта grade_sheet
"""

from .grade import Grade, load_grade_sheet
from .ranking import (
    DEFAULT_RANKING_CONFIG,
    RankingConfig,
    RankingResult,
    best_grade,
    rank_grades,
)

__all__ = [
    "Grade",
    "load_grade_sheet",
    "DEFAULT_RANKING_CONFIG",
    "RankingConfig",
    "RankingResult",
    "best_grade",
    "rank_grades",
]
