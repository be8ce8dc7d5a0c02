"""Persistent defaults for the demo CLI and host integrations."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

USER_DIR = Path.home() / ".tweenkit"
OPTIONS_FILE = USER_DIR / "options.json"

DEFAULT_OPTIONS: Dict[str, Any] = {
    "fps": 60,
    "easing": "linear",
    "duration": 1.0,
    "log_file": "tweenkit.log",
    "log_level": "INFO",
}


def load_options(path: Path | str = OPTIONS_FILE) -> Dict[str, Any]:
    """Return ``DEFAULT_OPTIONS`` updated with the values stored at ``path``.

    Unknown keys are ignored. A missing or unreadable file yields the
    defaults.
    """
    options = dict(DEFAULT_OPTIONS)
    path = Path(path)
    if not path.exists():
        return options
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception as exc:
        logger.warning("Failed to load options: %s", exc)
        return options
    if not isinstance(data, dict):
        logger.warning("Ignoring options file %s: expected an object", path)
        return options
    for key, value in data.items():
        if key in options:
            options[key] = value
    return options


def save_options(options: Mapping[str, Any], path: Path | str = OPTIONS_FILE) -> bool:
    """Write the known keys of ``options`` to ``path``. Returns ``True`` on success."""
    data = {k: options[k] for k in DEFAULT_OPTIONS if k in options}
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except Exception as exc:
        logger.warning("Failed to save options: %s", exc)
        return False
    return True


__all__ = ["USER_DIR", "OPTIONS_FILE", "DEFAULT_OPTIONS", "load_options", "save_options"]
