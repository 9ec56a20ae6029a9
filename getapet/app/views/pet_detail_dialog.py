"""Modal detail dialog for one pet with an Adopt action."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from getapet.viewmodels.pet_detail_vm import PetDetailVM
from .view_utils import safe_call


class PetDetailDialog(tk.Toplevel):
    """Shows name, category, age and adoption status; Adopt closes the dialog."""

    def __init__(
        self,
        parent: tk.Misc,
        vm: PetDetailVM,
        *,
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> None:
        super().__init__(parent)
        self.vm = vm
        self._on_error = on_error
        self.title(vm.title)
        self.resizable(False, False)
        self.transient(parent)

        body = ttk.Frame(self, style="Card.TFrame", padding=16)
        body.pack(fill="both", expand=True)

        ttk.Label(body, text=vm.title, style="Title.TLabel").grid(row=0, column=0, columnspan=2, sticky="w")
        ttk.Label(body, text=vm.category_label, style="Subtle.TLabel").grid(row=1, column=0, columnspan=2, sticky="w")

        ttk.Label(body, text="Age:", style="Card.TLabel").grid(row=2, column=0, sticky="w", pady=(12, 0))
        ttk.Label(body, text=vm.subtitle, style="Card.TLabel").grid(row=2, column=1, sticky="w", pady=(12, 0))
        ttk.Label(body, text="Photo:", style="Card.TLabel").grid(row=3, column=0, sticky="w")
        ttk.Label(body, text=vm.image_name or "-", style="Card.TLabel").grid(row=3, column=1, sticky="w")

        self.status_var = tk.StringVar(value=vm.status_text)
        ttk.Label(body, textvariable=self.status_var, style="Subtle.TLabel").grid(
            row=4, column=0, columnspan=2, sticky="w", pady=(12, 12)
        )

        buttons = ttk.Frame(body, style="Card.TFrame")
        buttons.grid(row=5, column=0, columnspan=2, sticky="e")
        self.btn_adopt = ttk.Button(buttons, text="Adopt", style="Primary.TButton", command=self._on_adopt_click)
        self.btn_adopt.pack(side=tk.LEFT, padx=(0, 6))
        ttk.Button(buttons, text="Close", command=self.destroy).pack(side=tk.LEFT)
        self._sync()

        self.bind("<Escape>", lambda _e: self.destroy())
        self.grab_set()
        self.btn_adopt.focus_set()

    def _sync(self) -> None:
        self.status_var.set(self.vm.status_text)
        self.btn_adopt.configure(
            text="Adopt" if self.vm.can_adopt else "Adopted",
            state="normal" if self.vm.can_adopt else "disabled",
        )

    def _on_adopt_click(self) -> None:
        safe_call(self.vm.cmd_adopt, on_error=self._on_error)
        self._sync()
        self.destroy()


__all__ = ["PetDetailDialog"]
