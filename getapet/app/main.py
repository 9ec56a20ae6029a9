# getapet/app/main.py
from __future__ import annotations
import logging
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.explorer_view import ExplorerView
from .views.pet_detail_dialog import PetDetailDialog

# ---- ViewModels ----
from ..viewmodels.explorer_vm import ExplorerVM
from ..viewmodels.pet_detail_vm import PetDetailVM
from ..viewmodels.settings_vm import SettingsVM

# ---- UseCases & Adapters ----
from ..adapters.catalog_json import CatalogJson
from ..adapters.storage_local import StorageLocal, default_root
from ..domain.catalog import PetCatalog
from ..domain.entities import Pet
from ..domain.ports import UseCaseError
from ..usecases.load_catalog import LoadCatalog
from ..usecases.load_user_prefs import LoadUserPrefs
from ..usecases.save_user_prefs import SaveUserPrefs
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire Views <-> ViewModels and local storage."""

    def __init__(self, root_dir: Optional[str] = None) -> None:
        self._log = logging.getLogger(__name__)
        storage = StorageLocal(root_dir=root_dir or default_root())
        self.uc_load_prefs = LoadUserPrefs(storage)
        self.uc_save_prefs = SaveUserPrefs(storage)
        self.uc_load_catalog = LoadCatalog(CatalogJson())

        # ---- ViewModels ----
        self.settings_vm = SettingsVM(on_save=self._persist_settings)
        self._pending_errors = []
        self._load_settings()
        logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)

        self.explorer_vm = ExplorerVM(
            self._load_catalog(),
            dedupe_adopted=self.settings_vm.dedupe_adopted,
            on_open_detail=self._on_open_detail,
            on_deselect=self._on_deselect,
        )

        # ---- Views ----
        self.win = MainWindowView(
            geometry=self.settings_vm.window_geometry,
            dedupe_adopted=self.settings_vm.dedupe_adopted,
            expand_categories=self.settings_vm.expand_categories,
            debug_logging=self.settings_vm.debug_logging,
            on_toggle_dedupe=self._on_toggle_dedupe,
            on_toggle_expand=self._on_toggle_expand,
            on_toggle_debug=self._on_toggle_debug,
            on_save_settings=self._on_save_settings,
        )
        self.explorer = ExplorerView(
            self.win.explorer_host,
            sections=ExplorerVM.SECTIONS,
            render_row=self.explorer_vm.row_for,
            on_select=self._on_select,
            expand_categories=self.settings_vm.expand_categories,
        )
        self.explorer.pack(fill="both", expand=True)
        self.explorer_vm.on_patch = self.explorer.apply_patch

        self.explorer_vm.load()
        self.win.title(self.explorer_vm.title)
        for err in self._pending_errors:
            self._toast_error(err)
        self._pending_errors.clear()

    # ------------------------------------------------------------------
    # Startup helpers
    # ------------------------------------------------------------------
    def _load_settings(self) -> None:
        try:
            payload = self.uc_load_prefs()
            if payload:
                self.settings_vm.apply_dict(payload)
        except (UseCaseError, ValueError) as err:
            self._log.warning("Falling back to default settings: %s", err)
            self._pending_errors.append(err)

    def _load_catalog(self) -> PetCatalog:
        try:
            return self.uc_load_catalog(self.settings_vm.catalog_path)
        except UseCaseError as err:
            self._pending_errors.append(err)
            return PetCatalog.default()

    # ------------------------------------------------------------------
    # Explorer callbacks
    # ------------------------------------------------------------------
    def _on_select(self, key: str) -> None:
        self.explorer_vm.select(key)

    def _on_deselect(self, key: str) -> None:
        self.explorer.deselect(key)

    def _on_open_detail(self, detail: PetDetailVM) -> None:
        adopt = detail.on_adopted

        def on_adopted(pet: Pet) -> None:
            if adopt:
                adopt(pet)
            self._after_adoption(pet)

        detail.on_adopted = on_adopted
        PetDetailDialog(self.win, detail, on_error=self._toast_error)

    def _after_adoption(self, pet: Pet) -> None:
        self.win.set_adopted_count(len(self.explorer_vm.adoptions))
        self.win.show_toast(f"You adopted {pet.name}!")

    # ------------------------------------------------------------------
    # Settings callbacks
    # ------------------------------------------------------------------
    def _on_toggle_dedupe(self, enabled: bool) -> None:
        self.settings_vm.dedupe_adopted = enabled
        self.explorer_vm.dedupe_adopted = self.settings_vm.dedupe_adopted

    def _on_toggle_expand(self, enabled: bool) -> None:
        self.settings_vm.expand_categories = enabled
        self.explorer.expand_categories = self.settings_vm.expand_categories

    def _on_toggle_debug(self, enabled: bool) -> None:
        self.settings_vm.set_debug_logging(enabled)
        level = logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)
        self._log.info("Log level now %s", logging.getLevelName(level))

    def _on_save_settings(self) -> None:
        self.settings_vm.cmd_save()

    def _persist_settings(self, payload: dict) -> None:
        try:
            self.uc_save_prefs(payload)
        except UseCaseError as err:
            self._toast_error(err, context="Save settings")
            return
        self.win.show_toast("Settings saved.")

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------
    def _toast_error(self, err: Exception, *, context: Optional[str] = None) -> None:
        if isinstance(err, UseCaseError):
            self._log.warning("UseCase error (%s): %s", err.code, err.message)
            message = err.message
        else:
            self._log.error("Unexpected error: %s", err)
            message = str(err) or "Unexpected error."
        if context:
            message = f"{context}: {message}"
        self.win.show_toast(message)


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
