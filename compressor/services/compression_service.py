"""Оркестратор сжатия: не более одной повторной попытки под бюджет.

Алгоритм:
1) Первая попытка с качеством по размеру исходника и стороной до 1920 px.
2) Если результат укладывается в бюджет, он и возвращается.
3) Иначе одна повторная попытка (качество 0.5, сторона до 1280 px); её результат
   возвращается даже при превышении бюджета.
Ошибки кодера не повторяются и выходят наружу как `EncodingFailed`.
"""
from __future__ import annotations

import asyncio
import functools
import logging
from concurrent.futures import Executor
from typing import List, Optional

from compressor.errors import EncodingFailed
from compressor.models.image_model import (
    DEFAULT_BUDGET,
    CompressedImage,
    CompressionBudget,
    CompressionResult,
    EncodeParameters,
    SourceImage,
)
from compressor.services.compression_params import escalated_attempt, first_attempt
from compressor.services.encoder_service import ImageEncoder

logger = logging.getLogger(__name__)


class CompressionService:
    def __init__(self, encoder: ImageEncoder, executor: Optional[Executor] = None) -> None:
        self._encoder = encoder
        self._executor = executor

    async def compress(
        self, source: SourceImage, budget: CompressionBudget = DEFAULT_BUDGET
    ) -> CompressionResult:
        """Сжимает `source` под `budget`.

        Raises:
            EncodingFailed: кодер выбросил исключение или вернул пустой/некорректный результат.
        """
        attempts: List[EncodeParameters] = [first_attempt(source.size, budget)]
        image = await self._run_attempt(source, attempts[0], 1)

        if not budget.fits(image.size):
            attempts.append(escalated_attempt(budget))
            image = await self._run_attempt(source, attempts[1], 2)
            if not budget.fits(image.size):
                logger.warning(
                    "%s: бюджет %d Б превышен после повторной попытки (%d Б)",
                    source.name, budget.limit_bytes, image.size,
                )

        return CompressionResult(image=image, budget=budget, attempts=tuple(attempts))

    async def _run_attempt(self, source: SourceImage, params: EncodeParameters, number: int) -> CompressedImage:
        loop = asyncio.get_running_loop()
        call = functools.partial(self._encoder.encode, source.data, params)
        try:
            data = await loop.run_in_executor(self._executor, call)
        except Exception as exc:
            logger.exception("Попытка %d для %s завершилась ошибкой", number, source.name)
            raise EncodingFailed(f"Ошибка кодирования {source.name}: {exc}") from exc

        if not isinstance(data, (bytes, bytearray)) or not data:
            raise EncodingFailed(f"Кодер вернул некорректный результат для {source.name}")

        image = CompressedImage(data=bytes(data), mime_type=source.mime_type)
        logger.info(
            "Попытка %d: %s, качество=%.2f, сторона<=%d px -> %d Б",
            number, source.name, params.quality, params.max_dimension_px, image.size,
        )
        return image
