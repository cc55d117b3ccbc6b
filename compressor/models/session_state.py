"""Состояние сессии сжатия как единое неизменяемое значение.

Принципы:
- SRP: все инварианты сессии (в том числе «во время сжатия повторный запуск недоступен»)
  проверяются в переходах состояния.
- Чистый код: каждый переход возвращает новое состояние, исходное не мутирует.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from compressor.errors import InvalidTransition
from compressor.models.image_model import CompressionResult, SourceImage


class Phase(str, Enum):
    IDLE = "idle"
    SELECTED = "selected"
    COMPRESSING = "compressing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SessionState:
    """Снимок сессии: фаза, выбранный источник, последний результат и ошибка."""
    phase: Phase = Phase.IDLE
    source: Optional[SourceImage] = None
    result: Optional[CompressionResult] = None
    error: Optional[str] = None

    # ---- Derived ----
    @property
    def is_busy(self) -> bool:
        return self.phase is Phase.COMPRESSING

    @property
    def can_compress(self) -> bool:
        return self.source is not None and not self.is_busy

    @property
    def can_save(self) -> bool:
        return self.result is not None and not self.is_busy

    # ---- Transitions ----
    def select(self, source: SourceImage) -> SessionState:
        """Новый выбор файла: результат и ошибка предыдущего источника сбрасываются."""
        self._forbid_while_busy("select")
        return SessionState(phase=Phase.SELECTED, source=source)

    def reject(self, message: str) -> SessionState:
        """Отклонённый выбор: источник и результат остаются прежними."""
        self._forbid_while_busy("reject")
        return replace(self, error=message)

    def start(self) -> SessionState:
        if not self.can_compress:
            raise InvalidTransition(self.phase.value, "start")
        return replace(self, phase=Phase.COMPRESSING, error=None)

    def succeed(self, result: CompressionResult) -> SessionState:
        self._require_busy("succeed")
        return replace(self, phase=Phase.SUCCEEDED, result=result, error=None)

    def fail(self, message: str) -> SessionState:
        # прежний успешный результат не трогаем
        self._require_busy("fail")
        return replace(self, phase=Phase.FAILED, error=message)

    # ---- Helpers ----
    def _forbid_while_busy(self, action: str) -> None:
        if self.is_busy:
            raise InvalidTransition(self.phase.value, action)

    def _require_busy(self, action: str) -> None:
        if not self.is_busy:
            raise InvalidTransition(self.phase.value, action)
