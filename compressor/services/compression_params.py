"""Подбор параметров кодирования по размеру исходного файла.

Чистые функции без побочных эффектов: одинаковый вход всегда даёт одинаковые параметры.
"""
from __future__ import annotations

from typing import Tuple

from compressor.models.image_model import CompressionBudget, EncodeParameters

MIB = 1024 * 1024

# (порог в байтах, качество); проверяются от большего порога к меньшему
QUALITY_STEPS: Tuple[Tuple[int, float], ...] = (
    (10 * MIB, 0.5),
    (5 * MIB, 0.6),
    (2 * MIB, 0.7),
)
DEFAULT_QUALITY = 0.8

FIRST_MAX_DIMENSION = 1920
ESCALATED_QUALITY = 0.5
ESCALATED_MAX_DIMENSION = 1280


def initial_quality(size_bytes: int) -> float:
    """Начальное качество: чем больше файл, тем агрессивнее первая попытка.

    Сравнения строгие: файл ровно на пороге попадает в следующую ступень
    (ровно 10 МБ -> 0.6, ровно 2 МБ -> 0.8).
    """
    for threshold, quality in QUALITY_STEPS:
        if size_bytes > threshold:
            return quality
    return DEFAULT_QUALITY


def first_attempt(size_bytes: int, budget: CompressionBudget) -> EncodeParameters:
    return EncodeParameters(
        quality=initial_quality(size_bytes),
        max_dimension_px=FIRST_MAX_DIMENSION,
        target_budget_bytes=budget.limit_bytes,
    )


def escalated_attempt(budget: CompressionBudget) -> EncodeParameters:
    """Фиксированный набор для повторной попытки, не зависит от первой."""
    return EncodeParameters(
        quality=ESCALATED_QUALITY,
        max_dimension_px=ESCALATED_MAX_DIMENSION,
        target_budget_bytes=budget.limit_bytes,
    )
