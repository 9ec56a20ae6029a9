"""JSON catalog files.

Expected shape::

    {
      "dogs": [{"name": "Rex", "age": 3, "image_name": "rex"}],
      "cats": [{"name": "Milo", "age": 2}]
    }

A top-level ``{"categories": {...}}`` wrapper is accepted as well.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from getapet.domain.ports import CatalogPort


class CatalogJson(CatalogPort):
    """Reads raw catalog payloads from JSON files."""

    def load_catalog(self, path: str) -> Dict[str, Any]:
        text = Path(path).read_text(encoding="utf-8")
        payload = json.loads(text)
        if isinstance(payload, dict) and isinstance(payload.get("categories"), dict):
            payload = payload["categories"]
        if not isinstance(payload, dict):
            raise ValueError(f"Catalog file {path} must contain a JSON object.")
        return payload
