import customtkinter as ctk

from funimage.config import AppConfig
from funimage.controllers.app_controller import AppController
from funimage.demos import DemoRegistry
from funimage.ui.bottom_bar import BottomBar
from funimage.ui.frame_view import FrameView
from funimage.ui.sidebar import Sidebar


class FunImageApp(ctk.CTk):
    def __init__(self, registry: DemoRegistry, config: AppConfig) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Functional Images")
        self.minsize(config.width + 320, config.height + 100)

        # root layout: left frame view, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._view = FrameView(self, width=config.width, height=config.height)
        self._view.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self, demos=registry)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            view=self._view,
            sidebar=self._sidebar,
            bottom=self._bottom,
            window=self,
            registry=registry,
            config=config,
        )
        self._controller.bind_events()

    def show_demo(self, name: str) -> None:
        self._controller.select_demo(name)
