"""Боковая панель: выбор файла, сведения об оригинале и результате, запуск и сохранение.

Принципы:
- SRP: управляет только виджетами, не содержит логики сжатия.
- ISP: получает данные через компактные методы `set_*`, события отдаёт через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from compressor.models.image_model import CompressionResult, SourceImage
from compressor.services.format_utils import format_size


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: файл, оригинал, результат."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_compress: Optional[Callable[[], None]] = None
        self.on_save: Optional[Callable[[], None]] = None

        # Controls
        self._title = ctk.CTkLabel(self, text="Сжатие изображений", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._intro = ctk.CTkLabel(self, text="Результат не больше 999 КБ", anchor="w", justify="left")
        self._intro.grid(row=1, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._open_btn = ctk.CTkButton(self, text="Выбрать изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=2, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._error_val = ctk.StringVar(value="")
        self._error_label = ctk.CTkLabel(
            self, textvariable=self._error_val, text_color="#d9534f", wraplength=250, anchor="w", justify="left"
        )
        self._error_label.grid(row=3, column=0, padx=8, pady=(0, 8), sticky="ew")

        # Original section
        self._orig_title = ctk.CTkLabel(self, text="Оригинал", font=ctk.CTkFont(size=16, weight="bold"))
        self._orig_title.grid(row=4, column=0, padx=8, pady=(8, 4), sticky="w")

        self._name_val = ctk.StringVar(value="—")
        self._orig_size_val = ctk.StringVar(value="—")
        self._info_name = ctk.CTkLabel(self, textvariable=self._name_val, wraplength=250, anchor="w", justify="left")
        self._info_orig_size = ctk.CTkLabel(self, textvariable=self._orig_size_val, anchor="w", justify="left")
        self._info_name.grid(row=5, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_orig_size.grid(row=6, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._compress_btn = ctk.CTkButton(self, text="Сжать", command=self._emit_compress)
        self._compress_btn.grid(row=7, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Result section
        self._result_title = ctk.CTkLabel(self, text="Результат", font=ctk.CTkFont(size=16, weight="bold"))
        self._result_title.grid(row=8, column=0, padx=8, pady=(8, 4), sticky="w")

        self._result_size_val = ctk.StringVar(value="—")
        self._ratio_val = ctk.StringVar(value="—")
        self._warning_val = ctk.StringVar(value="")
        self._info_result_size = ctk.CTkLabel(self, textvariable=self._result_size_val, anchor="w", justify="left")
        self._info_ratio = ctk.CTkLabel(self, textvariable=self._ratio_val, anchor="w", justify="left")
        self._info_warning = ctk.CTkLabel(
            self, textvariable=self._warning_val, text_color="#f0ad4e", wraplength=250, anchor="w", justify="left"
        )
        self._info_result_size.grid(row=9, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_ratio.grid(row=10, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_warning.grid(row=11, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._save_btn = ctk.CTkButton(self, text="Сохранить сжатое…", command=self._emit_save)
        self._save_btn.grid(row=12, column=0, padx=8, pady=(0, 8), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

        self.set_compress_visible(False)
        self.set_save_enabled(False)

    # ---- Public API ----
    def set_source_info(self, source: Optional[SourceImage]) -> None:
        if source is None:
            self._name_val.set("—")
            self._orig_size_val.set("—")
            return
        self._name_val.set(source.name)
        self._orig_size_val.set(format_size(source.size))

    def set_result_info(self, result: Optional[CompressionResult], original_size: int) -> None:
        """Отображает размер результата, степень сжатия и предупреждение о превышении бюджета."""
        if result is None:
            self._result_size_val.set("—")
            self._ratio_val.set("—")
            self._warning_val.set("")
            return
        self._result_size_val.set(f"Размер: {format_size(result.image.size)}")
        self._ratio_val.set(f"Степень сжатия: {result.compression_ratio(original_size)}%")
        if result.exceeded_budget:
            self._warning_val.set(
                f"Не удалось уложиться в {format_size(result.budget.limit_bytes)}: "
                f"итоговый размер {format_size(result.image.size)}"
            )
        else:
            self._warning_val.set("")

    def set_error(self, message: Optional[str]) -> None:
        self._error_val.set(message or "")

    def set_compress_visible(self, visible: bool) -> None:
        if visible:
            self._compress_btn.grid()
        else:
            self._compress_btn.grid_remove()

    def set_open_enabled(self, enabled: bool) -> None:
        self._open_btn.configure(state="normal" if enabled else "disabled")

    def set_save_enabled(self, enabled: bool) -> None:
        self._save_btn.configure(state="normal" if enabled else "disabled")

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_compress(self) -> None:
        if self.on_compress:
            self.on_compress()

    def _emit_save(self) -> None:
        if self.on_save:
            self.on_save()
