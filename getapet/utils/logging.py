from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "GETAPET_LOG_LEVEL"
DEBUG_ENV_VAR = "GETAPET_DEBUG"
LOG_FILE_ENV_VAR = "GETAPET_LOG_FILE"


def parse_level(value: object, fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a logging level."""
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    text = str(value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else fallback


def _env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_level() -> Optional[int]:
    """Level forced by the environment, or ``None`` when unset."""
    raw = os.getenv(LEVEL_ENV_VAR)
    if raw and raw.strip():
        return parse_level(raw)
    if _env_truthy(os.getenv(DEBUG_ENV_VAR)):
        return logging.DEBUG
    return None


def configure_root(default_level: int | str = logging.INFO) -> int:
    """
    Configure the root logger once with a compact format.

    Environment overrides:
      - GETAPET_LOG_LEVEL: explicit log level (name or number)
      - GETAPET_DEBUG: truthy -> DEBUG
      - GETAPET_LOG_FILE: also append records to this file
    """
    forced = env_level()
    effective = forced if forced is not None else parse_level(default_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
        log_file = os.getenv(LOG_FILE_ENV_VAR, "").strip()
        if log_file:
            handler = logging.FileHandler(log_file, encoding="utf-8")
            handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT, _DEFAULT_DATEFMT))
            root.addHandler(handler)
    root.setLevel(effective)
    return effective


def apply_gui_preferences(debug_enabled: bool) -> int:
    """
    Re-level the root logger from the settings toggle, env overrides first.
    Returns the effective level after the update.
    """
    forced = env_level()
    level = forced if forced is not None else (logging.DEBUG if debug_enabled else logging.INFO)
    logging.getLogger().setLevel(level)
    return level


def env_requests_debug() -> bool:
    """Return True if environment variables force DEBUG logging."""
    forced = env_level()
    return forced is not None and forced <= logging.DEBUG
