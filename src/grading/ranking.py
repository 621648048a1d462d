"""Ranking — выбор лучших оценок.

Линейный проход по оценкам с использованием только контракта сравнения
Fraction (compare_to). Все оценки, равные максимальной, возвращаются
в исходном порядке.
"""

import logging
from dataclasses import dataclass
from typing import List

from src.grading.grade import Grade

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankingConfig:
    """Конфигурация ранжирования.

    min_grades: минимальное число оценок для сравнения (не меньше 1)
    """
    min_grades: int = 2

    def __post_init__(self) -> None:
        if self.min_grades < 1:
            raise ValueError(f"min_grades must be at least 1, got {self.min_grades}")


DEFAULT_RANKING_CONFIG = RankingConfig()


@dataclass(frozen=True)
class RankingResult:
    """Результат ранжирования."""

    best: List[Grade]
    candidates_count: int

    @property
    def is_tie(self) -> bool:
        """Несколько оценок делят первое место."""
        return len(self.best) > 1


def best_grade(*grades: Grade, config: RankingConfig = DEFAULT_RANKING_CONFIG) -> List[Grade]:
    """Лучшие оценки среди переданных.

    Args:
        grades: Оценки для сравнения
        config: Конфигурация ранжирования

    Returns:
        Все оценки, равные максимальной, в исходном порядке

    Raises:
        ValueError: Если оценок меньше config.min_grades
    """
    if len(grades) < config.min_grades:
        raise ValueError(
            f"Please provide at least {config.min_grades} grades, got {len(grades)}"
        )

    best_grades: List[Grade] = []
    best = grades[0]
    for candidate in grades:
        comparison = candidate.grade.compare_to(best.grade)
        if comparison > 0:
            best = candidate
            best_grades = [candidate]
        elif comparison == 0:
            best_grades.append(candidate)

    logger.debug(
        "Ranked %d grades: best %s (%d tied)",
        len(grades),
        best.grade,
        len(best_grades),
    )
    return best_grades


def rank_grades(*grades: Grade, config: RankingConfig = DEFAULT_RANKING_CONFIG) -> RankingResult:
    """Ранжирование с диагностикой: лучшие оценки и число кандидатов."""
    return RankingResult(
        best=best_grade(*grades, config=config),
        candidates_count=len(grades),
    )
