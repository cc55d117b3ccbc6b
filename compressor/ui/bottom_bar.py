from __future__ import annotations

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=40, **kwargs)

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)  # status stretches

        self._status_value = ctk.StringVar(value="Готово")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status_value, anchor="w")
        self._status_label.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="ew")

        # Progress (hidden by default)
        self._progress = ctk.CTkProgressBar(self, mode="indeterminate", width=160)
        self._toggle_progress(visible=False)

    # public API (sync from controller)
    def set_status(self, text: str) -> None:
        self._status_value.set(text)

    def set_busy(self, busy: bool) -> None:
        self._toggle_progress(visible=busy)

    # helpers
    def _toggle_progress(self, visible: bool) -> None:
        if visible:
            self._progress.grid(row=0, column=1, padx=(6, 12), pady=8, sticky="e")
            self._progress.start()
        else:
            self._progress.stop()
            self._progress.grid_remove()
