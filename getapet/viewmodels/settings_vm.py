from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Mapping, Optional

from ..utils.logging import env_requests_debug


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    catalog_path: str = ""
    dedupe_adopted: bool = False
    expand_categories: bool = False
    window_geometry: str = "480x640"


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps app settings UI state and validation, no I/O here."""

    def __init__(
        self,
        *,
        config: Optional[SettingsConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or SettingsConfig()
        self.on_save = on_save
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def catalog_path(self) -> str:
        return self.config.catalog_path

    @catalog_path.setter
    def catalog_path(self, value: str) -> None:
        self.config = replace(self.config, catalog_path=self._coerce_optional_str(value))

    @property
    def dedupe_adopted(self) -> bool:
        return self.config.dedupe_adopted

    @dedupe_adopted.setter
    def dedupe_adopted(self, value: bool) -> None:
        self.config = replace(self.config, dedupe_adopted=self._coerce_bool(value))

    @property
    def expand_categories(self) -> bool:
        return self.config.expand_categories

    @expand_categories.setter
    def expand_categories(self, value: bool) -> None:
        self.config = replace(self.config, expand_categories=self._coerce_bool(value))

    @property
    def window_geometry(self) -> str:
        return self.config.window_geometry

    @window_geometry.setter
    def window_geometry(self, value: str) -> None:
        self.config = replace(self.config, window_geometry=self._coerce_geometry(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_flat_keys = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_flat_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])

        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    def set_debug_logging(self, enabled: bool) -> None:
        self.debug_logging = self._coerce_bool(enabled)

    def cmd_save(self) -> None:
        if self.on_save:
            self.on_save(self.to_dict())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "catalog_path":
            return self._coerce_optional_str(raw)
        if key in {"dedupe_adopted", "expand_categories"}:
            return self._coerce_bool(raw)
        if key == "window_geometry":
            return self._coerce_geometry(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_optional_str(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_geometry(value: Any) -> str:
        text = str(value or "").strip().lower()
        width, sep, height = text.partition("x")
        if not sep or not width.isdigit() or not height.isdigit():
            raise ValueError("window_geometry must look like '480x640'.")
        return f"{int(width)}x{int(height)}"


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return SettingsVM().to_dict()
