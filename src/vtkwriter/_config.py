from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from vtkwriter.formatting import DEFAULT_PRECISION

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".vtkwriter"
CONFIG_FILE = CONFIG_DIR / "vtkwriter.cfg"
DEFAULT_CONFIG = {
    "_comment": "force_default_file_extension: write every file as *.vtk. precision: fractional digits (0-17).",
    "force_default_file_extension": True,
    "precision": DEFAULT_PRECISION,
}
_MAX_PRECISION = 17
_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class WriterSettings:
    """Resolved writer options from vtkwriter.cfg."""

    force_default_file_extension: bool = True
    precision: int = DEFAULT_PRECISION


def ensure_user_config() -> None:
    """Ensure ~/.vtkwriter/vtkwriter.cfg exists with sane defaults."""

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if CONFIG_FILE.exists():
        return

    try:
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        loaded = json.loads(CONFIG_FILE.read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(loaded, dict):
        return DEFAULT_CONFIG.copy()
    return loaded


def _normalize_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    key = str(value).strip().lower()
    if key in _TRUE_STRINGS:
        return True
    if key in _FALSE_STRINGS:
        return False
    return None


def _normalize_precision(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        precision = int(value)
    except (TypeError, ValueError):
        return None
    if 0 <= precision <= _MAX_PRECISION:
        return precision
    return None


def get_writer_settings() -> WriterSettings:
    """Return the configured writer options, falling back to defaults per key."""

    raw_config = _load_user_config()

    force = _normalize_bool(raw_config.get("force_default_file_extension", True))
    if force is None:
        logger.warning("Ignoring invalid force_default_file_extension in %s", CONFIG_FILE)
        force = True

    precision = _normalize_precision(raw_config.get("precision", DEFAULT_PRECISION))
    if precision is None:
        logger.warning("Ignoring invalid precision in %s", CONFIG_FILE)
        precision = DEFAULT_PRECISION

    return WriterSettings(force_default_file_extension=force, precision=precision)
