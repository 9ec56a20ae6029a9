"""Shared visual theme for the Pet Explorer desktop views.

The module centralizes ttk style tokens and the Treeview row tags so the
explorer tree and the detail dialog render consistently.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BG = "#f3f5f9"
CARD_BG = "#ffffff"
BORDER = "#d9dfeb"
PRIMARY = "#2457ff"
TEXT = "#1f2937"
MUTED = "#64748b"

TAG_HEADER = "header"
TAG_ADOPTED = "adopted"
TAG_SECTION = "section"


def apply_modern_theme(root: tk.Misc) -> None:
    """Apply the ttk + tk visual theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BG)

    style.configure(".", background=BG, foreground=TEXT)
    style.configure("TFrame", background=BG)
    style.configure("Card.TFrame", background=CARD_BG, relief="flat", borderwidth=1)
    style.configure("TLabel", background=BG, foreground=TEXT)
    style.configure("Card.TLabel", background=CARD_BG, foreground=TEXT)
    style.configure("Subtle.TLabel", background=CARD_BG, foreground=MUTED)
    style.configure("Title.TLabel", background=CARD_BG, foreground=TEXT, font=("TkDefaultFont", 16, "bold"))

    style.configure("TButton", padding=(10, 6), background=CARD_BG, bordercolor=BORDER, relief="flat")
    style.map("TButton", background=[("active", "#edf2ff")])
    style.configure("Primary.TButton", background=PRIMARY, foreground="#ffffff", bordercolor=PRIMARY)
    style.map(
        "Primary.TButton",
        background=[("disabled", "#9fb3f5"), ("active", "#1b45ce")],
        foreground=[("disabled", "#eef2ff")],
    )

    style.configure("Treeview", rowheight=34, fieldbackground=CARD_BG, background=CARD_BG, foreground=TEXT)
    style.configure("Treeview.Heading", background="#e9eefb", foreground=TEXT, relief="flat")
    style.map("Treeview", background=[("selected", "#d9e4ff")], foreground=[("selected", TEXT)])


def configure_row_tags(tree: ttk.Treeview) -> None:
    """Register the row tags used by the explorer tree."""
    tree.tag_configure(TAG_SECTION, font=("TkDefaultFont", 9, "bold"), foreground=MUTED)
    tree.tag_configure(TAG_HEADER, font=("TkDefaultFont", 10, "bold"))
    tree.tag_configure(TAG_ADOPTED, background=PRIMARY, foreground="#ffffff")
