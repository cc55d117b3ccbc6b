"""Чтение исходных изображений с диска и сохранение результата.

Принципы:
- SRP: класс отвечает только за файловый ввод-вывод и проверку типа файла.
- OCP: новые источники (буфер обмена, URL) можно добавить отдельными методами.
"""
from __future__ import annotations

import asyncio
import mimetypes
from concurrent.futures import Executor
from pathlib import Path
from typing import Optional

from compressor.errors import ValidationError
from compressor.models.image_model import ACCEPTED_MIME_TYPES, CompressedImage, SourceImage


def guess_mime_type(file_path: str | Path) -> Optional[str]:
    """MIME-тип по расширению файла (как его определяет браузер при выборе файла)."""
    mime, _encoding = mimetypes.guess_type(str(file_path))
    return mime


def validate_mime_type(mime_type: Optional[str]) -> str:
    """Возвращает `mime_type`, если он допустим.

    Raises:
        ValidationError: тип не JPEG и не PNG.
    """
    if mime_type not in ACCEPTED_MIME_TYPES:
        raise ValidationError(mime_type)
    return mime_type


class ImageService:
    def __init__(self, executor: Optional[Executor] = None) -> None:
        self._executor = executor

    async def load_source(self, file_path: str | Path) -> SourceImage:
        """Читает выбранный файл и упаковывает его в `SourceImage`.

        Проверка типа выполняется до чтения. Само чтение идёт в исполнителе,
        тем же путём, что и кодирование.

        Raises:
            ValidationError: тип файла не поддерживается.
            FileNotFoundError: если путь не существует или не указывает на файл.
        """
        path = Path(file_path)
        mime_type = validate_mime_type(guess_mime_type(path))
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        loop = asyncio.get_running_loop()
        data = await loop.run_in_executor(self._executor, path.read_bytes)
        return SourceImage(data=data, mime_type=mime_type, name=path.name)

    def save_result(self, image: CompressedImage, file_path: str | Path) -> Path:
        """Записывает сжатые байты на диск и возвращает итоговый путь."""
        path = Path(file_path)
        path.write_bytes(image.data)
        return path
