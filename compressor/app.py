from concurrent.futures import ThreadPoolExecutor

import customtkinter as ctk

from compressor.config import Config
from compressor.controllers.app_controller import AppController
from compressor.services.compression_service import CompressionService
from compressor.services.encoder_service import PillowEncoder
from compressor.services.image_service import ImageService
from compressor.services.session_service import SessionService
from compressor.services.task_runner import AsyncRunner
from compressor.ui.bottom_bar import BottomBar
from compressor.ui.image_viewer import ImageViewer
from compressor.ui.sidebar import Sidebar


class CompressorApp(ctk.CTk):
    def __init__(self, config: Config) -> None:
        ctk.set_appearance_mode(config.appearance_mode)
        ctk.set_default_color_theme(config.color_theme)
        super().__init__()

        self.title("Image Compressor")
        self.minsize(900, 600)

        # root layout: left previews, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        # encoder and file reads share one worker pool
        self._executor = ThreadPoolExecutor(max_workers=config.encoder_workers, thread_name_prefix="encoder")
        self._runner = AsyncRunner()
        self._runner.start()

        image_service = ImageService(executor=self._executor)
        compression_service = CompressionService(PillowEncoder(), executor=self._executor)
        self._controller = AppController(
            viewer=self._viewer,
            sidebar=self._sidebar,
            bottom=self._bottom,
            window=self,
            session_service=SessionService(image_service, compression_service),
            image_service=image_service,
            runner=self._runner,
            poll_interval_ms=config.poll_interval_ms,
        )
        self._controller.bind_events()

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _on_close(self) -> None:
        # running attempts are not cancellable; the pool waits for them
        self._runner.stop()
        self._executor.shutdown(wait=True)
        self.destroy()
