from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict


DEFAULT_CONFIG_PATH = Path("config.toml")


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the bot config (config.toml by default).

    Returns an empty dict when the file is missing so every section falls back
    to environment variables.
    """
    target = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        return tomllib.load(handle)


def section(config: dict | None, name: str) -> Dict[str, Any]:
    """Return the ``[rdss.<name>]`` table, or an empty dict."""
    return (config or {}).get("rdss", {}).get(name, {}) or {}


def as_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


__all__ = ["load_raw_config", "section", "as_bool", "DEFAULT_CONFIG_PATH"]
