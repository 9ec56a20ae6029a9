"""
MainWindowView
---------------
Tkinter main window for the Pet Explorer. This file contains **only View
code**: no catalog or adoption logic. It exposes callback hooks that are
connected to ViewModels by ``getapet.app.main.App``.

The window provides:
  * Settings menu (toggles + save)
  * Host frame for the ExplorerView
  * StatusBar at the bottom
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .theme import apply_modern_theme


class MainWindowView(tk.Tk):
    """Top-level application window."""

    OnVoid = Optional[Callable[[], None]]
    OnToggle = Optional[Callable[[bool], None]]

    def __init__(
        self,
        *,
        title: str = "Pet Explorer",
        geometry: str = "480x640",
        dedupe_adopted: bool = False,
        expand_categories: bool = False,
        debug_logging: bool = False,
        on_toggle_dedupe: OnToggle = None,
        on_toggle_expand: OnToggle = None,
        on_toggle_debug: OnToggle = None,
        on_save_settings: OnVoid = None,
    ) -> None:
        super().__init__()
        apply_modern_theme(self)

        self.title(title)
        self.geometry(geometry)
        self.minsize(360, 420)

        self._on_toggle_dedupe = on_toggle_dedupe
        self._on_toggle_expand = on_toggle_expand
        self._on_toggle_debug = on_toggle_debug
        self._on_save_settings = on_save_settings

        self.dedupe_var = tk.BooleanVar(value=dedupe_adopted)
        self.expand_var = tk.BooleanVar(value=expand_categories)
        self.debug_var = tk.BooleanVar(value=debug_logging)

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_menu()
        self.explorer_host = ttk.Frame(self)
        self.explorer_host.grid(row=0, column=0, sticky="nsew", padx=8, pady=(8, 4))
        self._build_statusbar(self)

        self.bind("<Control-s>", lambda e: self._on_save_settings and self._on_save_settings())

    # ------------------------------------------------------------------
    # Menu
    # ------------------------------------------------------------------
    def _build_menu(self) -> None:
        menubar = tk.Menu(self)
        settings = tk.Menu(menubar, tearoff=False)
        settings.add_checkbutton(
            label="List each pet once under Adopted",
            variable=self.dedupe_var,
            command=lambda: self._on_toggle_dedupe and self._on_toggle_dedupe(self.dedupe_var.get()),
        )
        settings.add_checkbutton(
            label="Expand categories on start",
            variable=self.expand_var,
            command=lambda: self._on_toggle_expand and self._on_toggle_expand(self.expand_var.get()),
        )
        settings.add_checkbutton(
            label="Debug logging",
            variable=self.debug_var,
            command=lambda: self._on_toggle_debug and self._on_toggle_debug(self.debug_var.get()),
        )
        settings.add_separator()
        settings.add_command(label="Save Settings", accelerator="Ctrl+S", command=self._on_save_settings)
        menubar.add_cascade(label="Settings", menu=settings)
        self.config(menu=menubar)

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=1, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(0, weight=1)

        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var).grid(row=0, column=0, sticky="w")
        self.adopted_count_var = tk.StringVar(value="Adopted: 0")
        ttk.Label(status, textvariable=self.adopted_count_var).grid(row=0, column=1, sticky="e")

    # ------------------------------------------------------------------
    # Public API (called by VMs/presenters)
    # ------------------------------------------------------------------
    def show_toast(self, message: str, level: str = "info") -> None:
        """
        Lightweight user feedback in the statusbar.
        level is currently informational; styling could be extended later.
        """
        self.status_message_var.set(message)

    def set_adopted_count(self, count: int) -> None:
        self.adopted_count_var.set(f"Adopted: {count}")
