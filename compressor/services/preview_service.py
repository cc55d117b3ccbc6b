"""Превью изображений через data URL.

Контроллер передаёт виджету просмотра строку `data:<mime>;base64,...`,
виджет декодирует её обратно в `PIL.Image` только для отображения.
"""
from __future__ import annotations

import base64
import binascii
import io
from typing import Tuple

from PIL import Image, UnidentifiedImageError

_PREFIX = "data:"
_MARKER = ";base64,"


def to_data_url(data: bytes, mime_type: str) -> str:
    return f"{_PREFIX}{mime_type}{_MARKER}" + base64.b64encode(data).decode("ascii")


def parse_data_url(url: str) -> Tuple[str, bytes]:
    """Возвращает (mime, байты).

    Raises:
        ValueError: строка не является base64 data URL.
    """
    if not url.startswith(_PREFIX) or _MARKER not in url:
        raise ValueError("Ожидался data URL в кодировке base64")
    header, payload = url[len(_PREFIX):].split(_MARKER, 1)
    try:
        data = base64.b64decode(payload.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError("Некорректные данные base64 в data URL") from exc
    return header, data


def from_data_url(url: str) -> Image.Image:
    """Декодирует data URL в изображение RGBA для показа."""
    _mime, data = parse_data_url(url)
    try:
        with Image.open(io.BytesIO(data)) as img:
            return img.convert("RGBA")
    except UnidentifiedImageError as exc:
        raise ValueError("data URL не содержит изображения") from exc
