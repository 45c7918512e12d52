"""Application configuration helpers."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

CONFIG_PATH = Path(os.environ.get("PRODUCT_RANGE_CONFIG", "config/product_range.json"))
DEFAULT_CATALOG = "data/products.json"


@dataclass
class Settings:
    """Runtime configuration loaded from a JSON file or environment variables."""

    catalog_source: str = DEFAULT_CATALOG
    default_k: int = 10
    request_timeout: int = 20
    log_level: str = "INFO"

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from ``path`` or the default config file.

        Missing keys fall back to the defaults, so an absent file with no
        environment overrides yields ``Settings()``.

        Raises
        ------
        ValueError
            If ``default_k`` or ``request_timeout`` is not an integer, or
            ``default_k`` is negative.
        """

        config_path = path or CONFIG_PATH
        if config_path.exists():
            data = json.loads(config_path.read_text())
        else:
            data = cls._load_from_env()

        default_k = _as_int(data.get("default_k", 10), "default_k")
        if default_k < 0:
            raise ValueError("default_k must not be negative")

        return cls(
            catalog_source=str(data.get("catalog_source", DEFAULT_CATALOG)),
            default_k=default_k,
            request_timeout=_as_int(data.get("request_timeout", 20), "request_timeout"),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    @staticmethod
    def _load_from_env() -> Dict[str, Any]:
        env_mapping = {
            "catalog_source": os.environ.get("PRODUCT_RANGE_CATALOG"),
            "default_k": os.environ.get("PRODUCT_RANGE_K"),
            "request_timeout": os.environ.get("PRODUCT_RANGE_TIMEOUT"),
            "log_level": os.environ.get("PRODUCT_RANGE_LOG_LEVEL"),
        }
        return {k: v for k, v in env_mapping.items() if v}


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
