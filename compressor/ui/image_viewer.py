"""Виджет превью: оригинал и сжатое изображение рядом, вписанные в доступную область.

Принципы:
- SRP: отвечает только за отображение; данные приходят как data URL.
- Чистый код: чёткое разделение публичного API и внутренних обработчиков событий.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

from compressor.services.preview_service import from_data_url

_GAP = 16
_CAPTION_H = 24


class ImageViewer(ctk.CTkFrame):
    """Канва с двумя превью «Оригинал» / «Сжатое»."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._original_image: Optional[Image.Image] = None
        self._compressed_image: Optional[Image.Image] = None
        # ссылки на PhotoImage, иначе Tk их выгрузит
        self._tk_images: List[ImageTk.PhotoImage] = []

        self._canvas.bind("<Configure>", self._on_canvas_resize)

    # ---- Public API ----
    def set_original(self, data_url: Optional[str]) -> None:
        """Показывает исходное изображение; сжатое превью при этом сбрасывается."""
        self._original_image = from_data_url(data_url) if data_url else None
        self._compressed_image = None
        self._render()

    def set_compressed(self, data_url: Optional[str]) -> None:
        self._compressed_image = from_data_url(data_url) if data_url else None
        self._render()

    def clear(self) -> None:
        self._original_image = None
        self._compressed_image = None
        self._render()

    # ---- Internals ----
    def _on_canvas_resize(self, _event: tk.Event) -> None:
        self._render()

    def _render(self) -> None:
        self._canvas.delete("all")
        self._tk_images.clear()

        panels: List[Tuple[str, Image.Image]] = []
        if self._original_image is not None:
            panels.append(("Оригинал", self._original_image))
        if self._compressed_image is not None:
            panels.append(("Сжатое", self._compressed_image))
        if not panels:
            self._draw_placeholder()
            return

        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))
        slot_w = max(1, (canvas_w - _GAP * (len(panels) - 1)) // len(panels))
        slot_h = max(1, canvas_h - _CAPTION_H)

        x = 0
        for caption, img in panels:
            scaled = self._fit(img, slot_w, slot_h)
            ox = x + (slot_w - scaled.width) // 2
            oy = _CAPTION_H + (slot_h - scaled.height) // 2
            tk_img = ImageTk.PhotoImage(scaled)
            self._tk_images.append(tk_img)
            self._canvas.create_text(x + slot_w // 2, _CAPTION_H // 2, text=caption, fill=self._get_text_color())
            self._canvas.create_image(ox, oy, image=tk_img, anchor="nw")
            x += slot_w + _GAP

    def _fit(self, image: Image.Image, max_w: int, max_h: int) -> Image.Image:
        img_w, img_h = image.size
        if img_w == 0 or img_h == 0:
            return image
        scale = min(max_w / img_w, max_h / img_h, 1.0)
        size = (max(1, int(img_w * scale)), max(1, int(img_h * scale)))
        if size == image.size:
            return image
        return image.resize(size, Image.Resampling.LANCZOS)

    def _draw_placeholder(self) -> None:
        w = int(self._canvas.winfo_width())
        h = int(self._canvas.winfo_height())
        self._canvas.create_text(w // 2, h // 2, text="Выберите изображение JPEG или PNG", fill=self._get_text_color())

    def _get_canvas_bg(self) -> str:
        # CTk does not expose canvas theme, so pick neutral
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"

    def _get_text_color(self) -> str:
        return "#dddddd" if ctk.get_appearance_mode().lower() == "dark" else "#333333"
