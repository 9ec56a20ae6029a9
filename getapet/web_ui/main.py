"""NiceGUI entrypoint for the Pet Explorer web runtime."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

from nicegui import ui

from getapet.adapters.catalog_json import CatalogJson
from getapet.adapters.storage_local import StorageLocal, default_root
from getapet.domain.catalog import PetCatalog
from getapet.domain.entities import HeaderItem, Item, Section
from getapet.domain.ports import UseCaseError
from getapet.usecases.load_catalog import LoadCatalog
from getapet.usecases.load_user_prefs import LoadUserPrefs
from getapet.utils import logging as logging_utils
from getapet.viewmodels.explorer_vm import ExplorerVM
from getapet.viewmodels.list_model import ListPatch
from getapet.viewmodels.pet_detail_vm import PetDetailVM
from getapet.viewmodels.settings_vm import SettingsVM

LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --pet-card: #ffffff;
  --pet-border: #d9dfeb;
  --pet-accent: #2457ff;
  --pet-muted: #64748b;
}
.pet-page { max-width: 640px; margin: 0 auto; padding: 14px; }
.pet-card { background: var(--pet-card); border: 1px solid var(--pet-border); border-radius: 12px; }
.pet-row { border-radius: 5px; padding: 4px 8px; cursor: pointer; }
.pet-row-adopted { background: var(--pet-accent); color: #ffffff; }
.pet-muted { color: var(--pet-muted); font-size: 12px; }
</style>
        """
    )


def _notify_error(exc: Exception) -> None:
    """Render exceptions as concise NiceGUI toasts."""
    message = exc.message if isinstance(exc, UseCaseError) else str(exc)
    ui.notify(message, color="negative", close_button="OK")


def load_settings(root_dir: str) -> SettingsVM:
    settings_vm = SettingsVM()
    try:
        payload = LoadUserPrefs(StorageLocal(root_dir=root_dir))()
        if payload:
            settings_vm.apply_dict(payload)
    except (UseCaseError, ValueError) as exc:
        LOGGER.warning("Falling back to default settings: %s", exc)
    return settings_vm


def load_catalog(settings_vm: SettingsVM) -> PetCatalog:
    try:
        return LoadCatalog(CatalogJson())(settings_vm.catalog_path)
    except UseCaseError as exc:
        LOGGER.warning("Falling back to built-in catalog: %s", exc)
        return PetCatalog.default()


def _build_ui(settings_vm: SettingsVM, catalog: PetCatalog) -> None:
    """Register the NiceGUI page; each visit gets its own explorer state."""

    @ui.page("/")
    def index() -> None:
        refreshers: Dict[Section, object] = {}
        # one dialog per page, outside the refreshable sections
        dialog = ui.dialog()

        def on_patch(patch: ListPatch) -> None:
            refresher = refreshers.get(patch.section)
            if refresher is not None:
                refresher.refresh()

        def open_detail(detail: PetDetailVM) -> None:
            def adopt() -> None:
                dialog.close()
                try:
                    if detail.cmd_adopt():
                        ui.notify(f"You adopted {detail.pet.name}!", color="positive")
                except Exception as exc:
                    _notify_error(exc)

            dialog.clear()
            with dialog, ui.card().classes("pet-card q-pa-md"):
                ui.label(detail.title).classes("text-h5")
                ui.label(detail.category_label).classes("pet-muted")
                ui.label(detail.subtitle)
                ui.label(f"Photo: {detail.image_name or '-'}").classes("pet-muted")
                ui.label(detail.status_text)
                with ui.row().classes("q-gutter-sm"):
                    adopt_button = ui.button("Adopt" if detail.can_adopt else "Adopted", on_click=adopt, color="primary")
                    if not detail.can_adopt:
                        adopt_button.disable()
                    ui.button("Close", on_click=dialog.close)
            dialog.open()

        explorer_vm = ExplorerVM(
            catalog,
            dedupe_adopted=settings_vm.dedupe_adopted,
            on_patch=on_patch,
            on_open_detail=open_detail,
        )
        explorer_vm.load()

        def render_pet_row(section: Section, item: Item) -> None:
            row = explorer_vm.row_for(section, item)
            classes = "pet-row w-full" + (" pet-row-adopted" if row.highlighted else "")
            with ui.column().classes(classes).on("click", lambda _, key=item.key: explorer_vm.select(key)):
                ui.label(row.text)
                ui.label(row.secondary_text).classes("pet-muted")

        @ui.refreshable
        def render_available() -> None:
            for item in explorer_vm.model.items_in(Section.AVAILABLE):
                if not isinstance(item, HeaderItem):
                    continue
                with ui.expansion(item.title, value=settings_vm.expand_categories).classes("w-full"):
                    for child in explorer_vm.model.children_of(item):
                        render_pet_row(Section.AVAILABLE, child)

        @ui.refreshable
        def render_adopted() -> None:
            items = explorer_vm.model.items_in(Section.ADOPTED)
            if not items:
                ui.label("No pets adopted yet.").classes("pet-muted")
            for item in items:
                render_pet_row(Section.ADOPTED, item)

        refreshers[Section.AVAILABLE] = render_available
        refreshers[Section.ADOPTED] = render_adopted

        with ui.column().classes("pet-page w-full"):
            ui.label(explorer_vm.title).classes("text-h4")
            with ui.card().classes("pet-card w-full"):
                ui.label(Section.AVAILABLE.title).classes("text-subtitle1")
                render_available()
            with ui.card().classes("pet-card w-full"):
                ui.label(Section.ADOPTED.title).classes("text-subtitle1")
                render_adopted()


def _parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the Pet Explorer NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--home", default=None, help="Directory holding user_prefs.json.")
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    logging_utils.configure_root()
    args = _parse_args(argv)
    settings_vm = load_settings(args.home or default_root())
    logging_utils.apply_gui_preferences(settings_vm.debug_logging)
    catalog = load_catalog(settings_vm)
    if args.smoke_test:
        counts = {category.value: len(catalog.pets(category)) for category in catalog.categories()}
        print("web-smoke-ok", counts)
        return
    _install_theme()
    _build_ui(settings_vm, catalog)
    ui.run(
        host=args.host,
        port=args.port,
        title="Pet Explorer",
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
