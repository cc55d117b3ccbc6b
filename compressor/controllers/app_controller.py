"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс связывает UI и сервисы; решения о параметрах сжатия принимают сервисы.
- DIP: зависит от сервисов, переданных снаружи; конкретные реализации собираются в `app.py`.
Clean Code:
- Всё отображение выводится из одного значения `SessionState` в `_render`.
"""
from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from pathlib import PurePath
from tkinter import filedialog, TclError
from typing import Any, Callable, Optional

import customtkinter as ctk

from compressor.errors import EncodingFailed
from compressor.logger import get_logger
from compressor.models.image_model import CompressionResult, SourceImage
from compressor.models.session_state import Phase, SessionState
from compressor.services.format_utils import compressed_filename, format_size
from compressor.services.image_service import ImageService
from compressor.services.preview_service import to_data_url
from compressor.services.session_service import READ_ERROR_MESSAGE, SessionService
from compressor.services.task_runner import AsyncRunner
from compressor.ui.bottom_bar import BottomBar
from compressor.ui.image_viewer import ImageViewer
from compressor.ui.sidebar import Sidebar

logger = get_logger(__name__)

_STATUS = {
    Phase.IDLE: "Выберите изображение",
    Phase.SELECTED: "Изображение выбрано",
    Phase.COMPRESSING: "Сжатие…",
    Phase.SUCCEEDED: "Готово",
    Phase.FAILED: "Ошибка сжатия",
}


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Запуск чтения файла и сжатия через `AsyncRunner`, опрос результата из потока Tk.
    - Сохранение результата через `ImageService`.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    session_service: SessionService
    image_service: ImageService
    runner: AsyncRunner
    poll_interval_ms: int = 50

    _state: SessionState = SessionState()
    _pending: Optional[Future] = None
    _shown_source: Optional[SourceImage] = None
    _shown_result: Optional[CompressionResult] = None

    @property
    def state(self) -> SessionState:
        return self._state

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами."""
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_compress = self._handle_compress
        self.sidebar.on_save = self._handle_save
        self._render()

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        if self._pending is not None or self._state.is_busy:
            return
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите изображение",
                filetypes=(
                    ("JPEG / PNG", "*.jpg *.jpeg *.png"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return

        future = self.runner.submit(self.session_service.select_file(self._state, file_path))
        self._watch(future, self._on_file_selected)

    def _handle_compress(self) -> None:
        if self._pending is not None or not self._state.can_compress:
            return
        self._state = self._state.start()
        self._render()
        future = self.runner.submit(self.session_service.compress(self._state))
        self._watch(future, self._on_compressed)

    def _handle_save(self) -> None:
        state = self._state
        if not state.can_save or state.result is None or state.source is None:
            return
        initial_name = compressed_filename(state.source.name)
        try:
            file_path = filedialog.asksaveasfilename(
                title="Сохранить сжатое изображение",
                initialfile=initial_name,
                defaultextension=PurePath(initial_name).suffix,
            )
        except TclError:
            return
        if not file_path:
            return
        try:
            saved = self.image_service.save_result(state.result.image, file_path)
        except OSError:
            logger.exception("Не удалось сохранить %s", file_path)
            self.sidebar.set_error("Не удалось сохранить файл.")
            return
        self.bottom.set_status(f"Сохранено: {saved.name}")

    # ---- Async results ----
    def _on_file_selected(self, future: Future) -> None:
        try:
            self._state = future.result()
        except Exception:
            logger.exception("Ошибка при выборе файла")
            self._state = self._state.reject(READ_ERROR_MESSAGE)
        self._render()

    def _on_compressed(self, future: Future) -> None:
        try:
            self._state = future.result()
        except Exception:
            logger.exception("Ошибка при сжатии")
            self._state = self._state.fail(EncodingFailed.user_message)
        self._render()

    def _watch(self, future: Future, on_done: Callable[[Future], Any]) -> None:
        self._pending = future

        def poll() -> None:
            if not future.done():
                self.window.after(self.poll_interval_ms, poll)
                return
            self._pending = None
            on_done(future)

        self.window.after(self.poll_interval_ms, poll)

    # ---- Helpers ----
    def _render(self) -> None:
        state = self._state
        self.sidebar.set_source_info(state.source)
        original_size = state.source.size if state.source else 0
        self.sidebar.set_result_info(state.result, original_size)
        self.sidebar.set_error(state.error)
        self.sidebar.set_compress_visible(state.can_compress)
        self.sidebar.set_open_enabled(not state.is_busy)
        self.sidebar.set_save_enabled(state.can_save)

        self.bottom.set_busy(state.is_busy)
        self.bottom.set_status(self._status_text(state))

        self._sync_previews(state)

    def _sync_previews(self, state: SessionState) -> None:
        if state.source is not self._shown_source:
            self._shown_source = state.source
            self._shown_result = None
            if state.source is None:
                self.viewer.clear()
            else:
                self.viewer.set_original(to_data_url(state.source.data, state.source.mime_type))
        if state.result is not self._shown_result:
            self._shown_result = state.result
            if state.result is None:
                self.viewer.set_compressed(None)
            else:
                image = state.result.image
                self.viewer.set_compressed(to_data_url(image.data, image.mime_type))

    def _status_text(self, state: SessionState) -> str:
        text = _STATUS[state.phase]
        if state.phase is Phase.SUCCEEDED and state.result is not None:
            text = f"{text}: {format_size(state.result.image.size)}"
            if state.result.exceeded_budget:
                text += " (больше 999 КБ)"
        return text
