# passcraft/config.py
"""
Settings persistence for passcraft.
Settings saved as JSON in %APPDATA%/Passcraft/config.json (Windows) or ~/.passcraft/config.json (fallback).
PASSCRAFT_CONFIG overrides the file location.
"""

import os
import json
import logging
from typing import Dict, Any

from .policy import GenerationPolicy

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "include_uppercase": True,
    "include_lowercase": True,
    "include_numbers": True,
    "include_symbols": True,
    # range offered by the GUI slider; the generator itself accepts 1-128
    "ui_min_length": 6,
    "ui_max_length": 32,
    "copied_reset_ms": 2000,
    "log_level": "WARNING",
}

_POLICY_KEYS = ("length", "include_uppercase", "include_lowercase", "include_numbers", "include_symbols")


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Passcraft")
    return os.path.join(os.path.expanduser("~"), ".passcraft")


def config_path() -> str:
    override = os.getenv("PASSCRAFT_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")


def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out


def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)


def policy_from_config(cfg: Dict[str, Any], **overrides) -> GenerationPolicy:
    """Build a GenerationPolicy from config values; non-None overrides win."""
    values = {k: cfg.get(k, DEFAULTS[k]) for k in _POLICY_KEYS}
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GenerationPolicy(**values)
