from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=48, **kwargs)

        # callbacks
        self.on_stop: Optional[Callable[[], None]] = None

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(2, weight=1)  # status stretches

        self._frame_value = ctk.StringVar(value="Кадр: —")
        self._frame_label = ctk.CTkLabel(self, textvariable=self._frame_value, width=110, anchor="w")
        self._frame_label.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")

        self._time_value = ctk.StringVar(value="t = —")
        self._time_label = ctk.CTkLabel(self, textvariable=self._time_value, width=90, anchor="w")
        self._time_label.grid(row=0, column=1, padx=6, pady=8, sticky="w")

        self._status_value = ctk.StringVar(value="")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status_value, anchor="w")
        self._status_label.grid(row=0, column=2, padx=6, pady=8, sticky="ew")

        self._stop_btn = ctk.CTkButton(self, text="Стоп", width=80, command=self._on_stop_click)
        self._stop_btn.grid(row=0, column=3, padx=(6, 10), pady=8, sticky="e")
        self.set_running(False)

    # public API (sync from controller)
    def set_progress(self, frame: Optional[int], time: Optional[float]) -> None:
        self._frame_value.set("Кадр: —" if frame is None else f"Кадр: {frame}")
        self._time_value.set("t = —" if time is None else f"t = {time:.1f}")

    def set_status(self, text: str) -> None:
        self._status_value.set(text)

    def set_running(self, running: bool) -> None:
        self._stop_btn.configure(state="normal" if running else "disabled")

    # events
    def _on_stop_click(self) -> None:
        if self.on_stop:
            self.on_stop()
