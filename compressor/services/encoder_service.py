"""Кодер изображений на Pillow: пересжатие с потерями и уменьшение размеров.

Принципы:
- SRP: только работа с пикселями и форматами; выбор параметров делает оркестратор.
- LSP: любой объект с методом `encode(data, params) -> bytes` взаимозаменяем с `PillowEncoder`.
"""
from __future__ import annotations

import io
from typing import Protocol

from PIL import Image, ImageOps

from compressor.models.image_model import EncodeParameters

_SUPPORTED_FORMATS = ("JPEG", "PNG")


class ImageEncoder(Protocol):
    def encode(self, data: bytes, params: EncodeParameters) -> bytes:
        ...


class PillowEncoder:
    """Сжимает JPEG/PNG, стараясь (без гарантии) уложиться в `target_budget_bytes`.

    Формат исходника сохраняется. Пока результат больше цели, делает до
    `max_iterations` шагов: качество и обе стороны умножаются на `step`
    (для PNG уменьшаются только стороны).
    """
    def __init__(self, max_iterations: int = 10, step: float = 0.95) -> None:
        if not 0.0 < step < 1.0:
            raise ValueError(f"Шаг должен быть в диапазоне (0, 1): {step}")
        self._max_iterations = max_iterations
        self._step = step

    def encode(self, data: bytes, params: EncodeParameters) -> bytes:
        """Кодирует изображение с заданными параметрами.

        Raises:
            ValueError: пустые данные или формат, отличный от JPEG/PNG.
            PIL.UnidentifiedImageError: данные не распознаны как изображение.
            OSError: повреждённый файл.
        """
        if not data:
            raise ValueError("Пустые данные изображения")

        with Image.open(io.BytesIO(data)) as opened:
            fmt = opened.format
            if fmt not in _SUPPORTED_FORMATS:
                raise ValueError(f"Неподдерживаемый формат: {fmt}")
            image = ImageOps.exif_transpose(opened)

        image = self._fit(image, params.max_dimension_px)
        if fmt == "JPEG":
            image = self._to_rgb(image)

        quality = params.quality
        output = self._save(image, fmt, quality)
        for _ in range(self._max_iterations):
            if len(output) <= params.target_budget_bytes:
                break
            width, height = image.size
            new_size = (max(1, int(width * self._step)), max(1, int(height * self._step)))
            if new_size == image.size and fmt == "PNG":
                break
            if new_size != image.size:
                image = image.resize(new_size, Image.Resampling.LANCZOS)
            if fmt == "JPEG":
                quality *= self._step
            output = self._save(image, fmt, quality)
        return output

    # ---------- Вспомогательные функции ----------
    def _fit(self, image: Image.Image, max_dimension: int) -> Image.Image:
        """Уменьшает большую сторону до `max_dimension`, без увеличения."""
        if max(image.size) <= max_dimension:
            return image
        resized = image.copy()
        resized.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)
        return resized

    def _to_rgb(self, image: Image.Image) -> Image.Image:
        """JPEG не хранит альфу: прозрачные области заливаются белым."""
        if image.mode in ("RGB", "L"):
            return image
        if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
            rgba = image.convert("RGBA")
            background = Image.new("RGB", rgba.size, (255, 255, 255))
            background.paste(rgba, mask=rgba.getchannel("A"))
            return background
        return image.convert("RGB")

    def _save(self, image: Image.Image, fmt: str, quality: float) -> bytes:
        bio = io.BytesIO()
        if fmt == "JPEG":
            jpeg_q = max(1, min(95, int(round(quality * 100))))
            image.save(bio, format="JPEG", quality=jpeg_q, optimize=True, progressive=True)
        else:
            image.save(bio, format="PNG", optimize=True)
        return bio.getvalue()
