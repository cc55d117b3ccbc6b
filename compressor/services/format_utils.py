"""Форматирование для интерфейса: размеры файлов и имя сохраняемого результата."""
from __future__ import annotations

from pathlib import PurePath

_KB = 1024
_MB = 1024 * 1024


def format_size(size_bytes: int) -> str:
    if size_bytes < _KB:
        return f"{size_bytes} Б"
    if size_bytes < _MB:
        return f"{size_bytes / _KB:.2f} КБ"
    return f"{size_bytes / _MB:.2f} МБ"


def compressed_filename(name: str) -> str:
    """`photo.jpg` -> `photo-compressed.jpg`; расширение начинается с последней точки."""
    name = PurePath(name).name if name else ""
    if not name:
        name = "image"
    dot = name.rfind(".")
    if dot == -1:
        return f"{name}-compressed"
    return f"{name[:dot]}-compressed{name[dot:]}"
