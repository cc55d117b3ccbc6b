"""Настройки приложения из переменных окружения (с поддержкой `.env`).

Бюджет сжатия здесь намеренно отсутствует: он фиксирован (999 КБ).
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Переменная {name} должна быть целым числом: {raw!r}") from None


@dataclass
class Config:
    """Конфигурация приложения."""

    appearance_mode: str = field(default_factory=lambda: os.getenv("APPEARANCE_MODE", "system"))
    color_theme: str = field(default_factory=lambda: os.getenv("COLOR_THEME", "blue"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    # период опроса фоновой задачи из Tk, мс
    poll_interval_ms: int = field(default_factory=lambda: _env_int("POLL_INTERVAL_MS", 50))
    encoder_workers: int = field(default_factory=lambda: _env_int("ENCODER_WORKERS", 1))

    def __post_init__(self) -> None:
        if self.poll_interval_ms <= 0:
            raise ValueError(f"POLL_INTERVAL_MS должен быть положительным: {self.poll_interval_ms}")
        if self.encoder_workers <= 0:
            raise ValueError(f"ENCODER_WORKERS должен быть положительным: {self.encoder_workers}")


@lru_cache()
def get_config() -> Config:
    """Return a cached configuration instance."""
    return Config()
