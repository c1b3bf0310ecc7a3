"""Виджет показа кадров: принимает готовый буфер пикселей и рисует его на канве.

Принципы:
- SRP: только представление; буфер читается, но не изменяется.
- Кадр рисуется 1:1, без масштабирования и сглаживания.
"""
from __future__ import annotations

from typing import Optional

import customtkinter as ctk
import tkinter as tk
from PIL import ImageTk

from funimage.models.pixel_buffer import PixelBuffer


class FrameView(ctk.CTkFrame):
    """Канва фиксированного размера под растр демо."""
    def __init__(self, master: ctk.CTk | tk.Misc, width: int, height: int, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, width=width, height=height, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        # PhotoImage must outlive the canvas item
        self._tk_frame: Optional[ImageTk.PhotoImage] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)

    # ---- Public API ----
    def set_frame_size(self, width: int, height: int) -> None:
        """Подгоняет канву под размер растра нового демо."""
        self._canvas.configure(width=width, height=height)

    def present(self, buffer: PixelBuffer) -> None:
        """Показывает содержимое буфера (копия снимается сразу)."""
        self._tk_frame = ImageTk.PhotoImage(buffer.to_pil())
        self._draw()

    def clear(self) -> None:
        self._tk_frame = None
        self._canvas.delete("all")

    # ---- Internals ----
    def _on_canvas_resize(self, _event: tk.Event) -> None:
        self._draw()

    def _draw(self) -> None:
        self._canvas.delete("all")
        if self._tk_frame is None:
            return
        canvas_w = int(self._canvas.winfo_width())
        canvas_h = int(self._canvas.winfo_height())
        x = max(0, (canvas_w - self._tk_frame.width()) // 2)
        y = max(0, (canvas_h - self._tk_frame.height()) // 2)
        self._canvas.create_image(x, y, image=self._tk_frame, anchor="nw")

    def _get_canvas_bg(self) -> str:
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"
