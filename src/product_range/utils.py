"""Shared utility helpers for Product Range."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def ensure_directory(path: Path) -> None:
    """Create parent directories for ``path`` if they do not exist."""

    path.parent.mkdir(parents=True, exist_ok=True)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)
