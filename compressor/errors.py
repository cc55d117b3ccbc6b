"""Иерархия ошибок приложения.

`CompressionError` и наследники переводятся контроллером в состояние сессии;
`InvalidTransition` означает ошибку в логике вызовов и не показывается пользователю.
"""
from __future__ import annotations


class CompressionError(Exception):
    """Базовая ошибка сжатия с сообщением для пользователя."""
    user_message = "Ошибка сжатия изображения. Попробуйте ещё раз."


class ValidationError(CompressionError):
    """Тип файла не входит в набор допустимых (JPEG, PNG)."""
    user_message = "Пожалуйста, выберите изображение JPEG или PNG."

    def __init__(self, mime_type: str | None) -> None:
        super().__init__(f"Неподдерживаемый тип файла: {mime_type or 'неизвестен'}")
        self.mime_type = mime_type


class EncodingFailed(CompressionError):
    """Кодер завершился с ошибкой или вернул некорректный результат."""


class InvalidTransition(Exception):
    """Недопустимый переход состояния сессии."""

    def __init__(self, phase: str, action: str) -> None:
        super().__init__(f"Переход '{action}' недопустим из состояния '{phase}'")
        self.phase = phase
        self.action = action
