"""Сценарий сессии без привязки к UI: выбор файла и запуск сжатия.

Все ошибки `CompressionError` превращаются в состояние сессии, так что до
интерфейса исключения не доходят.
"""
from __future__ import annotations

import logging
from pathlib import Path

from compressor.errors import CompressionError, InvalidTransition, ValidationError
from compressor.models.image_model import DEFAULT_BUDGET, CompressionBudget
from compressor.models.session_state import SessionState
from compressor.services.compression_service import CompressionService
from compressor.services.image_service import ImageService

logger = logging.getLogger(__name__)

READ_ERROR_MESSAGE = "Не удалось прочитать файл. Попробуйте выбрать другой."


class SessionService:
    def __init__(
        self,
        image_service: ImageService,
        compression_service: CompressionService,
        budget: CompressionBudget = DEFAULT_BUDGET,
    ) -> None:
        self._image_service = image_service
        self._compression_service = compression_service
        self._budget = budget

    @property
    def budget(self) -> CompressionBudget:
        return self._budget

    async def select_file(self, state: SessionState, file_path: str | Path) -> SessionState:
        """Загружает файл; неподдерживаемый тип до сжатия не доходит."""
        try:
            source = await self._image_service.load_source(file_path)
        except ValidationError as exc:
            logger.info("Файл отклонён: %s", exc)
            return state.reject(exc.user_message)
        except OSError:
            logger.exception("Не удалось прочитать %s", file_path)
            return state.reject(READ_ERROR_MESSAGE)
        logger.info("Выбран файл %s (%d Б, %s)", source.name, source.size, source.mime_type)
        return state.select(source)

    async def compress(self, state: SessionState) -> SessionState:
        """Выполняет сжатие для состояния, уже переведённого в фазу сжатия (`state.start()`)."""
        if not state.is_busy or state.source is None:
            raise InvalidTransition(state.phase.value, "compress")
        try:
            result = await self._compression_service.compress(state.source, self._budget)
        except CompressionError as exc:
            return state.fail(exc.user_message)
        return state.succeed(result)
