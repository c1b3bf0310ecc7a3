"""Боковая панель: выбор демо и информация о нём.

Принципы:
- SRP: управляет только UI выбора, не строит изображения.
- ISP: события через `on_*`, состояние задаётся компактными методами `set_*`.
"""
from __future__ import annotations

from typing import Callable, Iterable, Optional

import customtkinter as ctk

from funimage.demos import Demo


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: список демо, информация."""
    def __init__(self, master: ctk.CTk, demos: Iterable[Demo], **kwargs) -> None:
        super().__init__(master, width=260, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_demo_change: Optional[Callable[[str], None]] = None

        self._title = ctk.CTkLabel(self, text="Демо", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._demo_name = ctk.StringVar(value="")
        self._demo_list = ctk.CTkScrollableFrame(self, height=260)
        self._demo_list.grid(row=1, column=0, padx=8, pady=(0, 12), sticky="nsew")
        self._demo_list.grid_columnconfigure(0, weight=1)
        for row, demo in enumerate(demos):
            suffix = " ▶" if demo.kind == "animation" else ""
            rb = ctk.CTkRadioButton(
                self._demo_list,
                text=f"{demo.name}{suffix}",
                variable=self._demo_name,
                value=demo.name,
                command=self._emit_demo_change,
            )
            rb.grid(row=row, column=0, padx=6, pady=(4, 2), sticky="w")
        self.grid_rowconfigure(1, weight=1)

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=2, column=0, padx=8, pady=(8, 4), sticky="w")

        self._desc_val = ctk.StringVar(value="—")
        self._kind_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")

        self._info_desc = ctk.CTkLabel(self, textvariable=self._desc_val, wraplength=230, anchor="w", justify="left")
        self._info_kind = ctk.CTkLabel(self, textvariable=self._kind_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")

        self._info_desc.grid(row=3, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_kind.grid(row=4, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=5, column=0, padx=8, pady=(0, 10), sticky="ew")

    # ---- Public API ----
    def set_demo_value(self, name: str) -> None:
        self._demo_name.set(name)

    def set_demo_info(self, demo: Demo) -> None:
        self._desc_val.set(demo.description)
        self._kind_val.set("Тип: анимация" if demo.kind == "animation" else "Тип: изображение")
        self._dims_val.set(f"Размер: {demo.width}×{demo.height} px")

    # ---- Internals ----
    def _emit_demo_change(self) -> None:
        if self.on_demo_change:
            self.on_demo_change(self._demo_name.get())
