"""Модели данных для исходного и сжатого изображений.

Принципы:
- SRP: только структура данных, без логики сжатия.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

JPEG_MIME = "image/jpeg"
PNG_MIME = "image/png"
ACCEPTED_MIME_TYPES: Tuple[str, ...] = (JPEG_MIME, PNG_MIME)

# 999 КБ, фиксированный бюджет приложения
BUDGET_BYTES = 999 * 1024


@dataclass(frozen=True)
class SourceImage:
    """Неизменяемое исходное изображение, выбранное пользователем.

    Fields:
        data: Сырые байты файла.
        mime_type: "image/jpeg" | "image/png".
        name: Отображаемое имя файла.
        size: Размер в байтах (вычисляется из `data`).
    """
    data: bytes = field(repr=False)
    mime_type: str
    name: str
    size: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", len(self.data))


@dataclass(frozen=True)
class CompressionBudget:
    """Порог размера результата, байт."""
    limit_bytes: int = BUDGET_BYTES

    def __post_init__(self) -> None:
        if self.limit_bytes <= 0:
            raise ValueError(f"Бюджет должен быть положительным: {self.limit_bytes}")

    def fits(self, size_bytes: int) -> bool:
        return size_bytes <= self.limit_bytes


DEFAULT_BUDGET = CompressionBudget()


@dataclass(frozen=True)
class EncodeParameters:
    """Параметры одной попытки кодирования.

    Fields:
        quality: Коэффициент качества в диапазоне (0, 1].
        max_dimension_px: Максимальная длина большей стороны, px.
        target_budget_bytes: Целевой размер, которого кодер старается достичь.
    """
    quality: float
    max_dimension_px: int
    target_budget_bytes: int

    def __post_init__(self) -> None:
        if not 0.0 < self.quality <= 1.0:
            raise ValueError(f"Качество вне диапазона (0, 1]: {self.quality}")
        if self.max_dimension_px <= 0:
            raise ValueError(f"Некорректный максимальный размер: {self.max_dimension_px}")
        if self.target_budget_bytes <= 0:
            raise ValueError(f"Некорректный бюджет: {self.target_budget_bytes}")


@dataclass(frozen=True)
class CompressedImage:
    """Результат кодирования. Размер берётся из фактических байтов, без подгонки."""
    data: bytes = field(repr=False)
    mime_type: str
    size: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", len(self.data))


@dataclass(frozen=True)
class CompressionResult:
    """Итог работы оркестратора: финальное изображение и использованные попытки.

    Превышение бюджета после повторной попытки не является ошибкой:
    `exceeded_budget` сообщает об этом вызывающему коду.
    """
    image: CompressedImage
    budget: CompressionBudget
    attempts: Tuple[EncodeParameters, ...]

    @property
    def within_budget(self) -> bool:
        return self.budget.fits(self.image.size)

    @property
    def exceeded_budget(self) -> bool:
        return not self.within_budget

    @property
    def was_escalated(self) -> bool:
        return len(self.attempts) > 1

    def compression_ratio(self, original_size: int) -> int:
        """Доля сэкономленных байт в процентах (округлённая)."""
        if original_size <= 0:
            return 0
        return round((1 - self.image.size / original_size) * 100)
