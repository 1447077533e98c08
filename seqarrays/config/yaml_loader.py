"""Packaged defaults (defaults.yaml).

The file is read once and cached. Point SEQARRAYS_DEFAULTS_PATH at
another YAML file to replace it, then call reload_defaults().

This module imports nothing from the rest of seqarrays.config, so every
other config module may import it.

Usage:
    from seqarrays.config.yaml_loader import get_default
    capacity = get_default('blocked.block_capacity')
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

ENV_VAR = "SEQARRAYS_DEFAULTS_PATH"
PACKAGED_DEFAULTS = Path(__file__).with_name("defaults.yaml")

_cache: dict[str, Any] | None = None


def _resolve_path() -> Path:
    """Location of the defaults file.

    An existing file named by SEQARRAYS_DEFAULTS_PATH wins; otherwise the
    copy shipped inside the package is used.

    Raises:
        FileNotFoundError: If neither file exists.
    """
    override = os.getenv(ENV_VAR)
    if override:
        candidate = Path(override)
        if candidate.exists():
            return candidate
        logger.debug(f"{ENV_VAR}={override} does not exist, using packaged defaults")

    if not PACKAGED_DEFAULTS.exists():
        raise FileNotFoundError(
            f"Packaged defaults missing: {PACKAGED_DEFAULTS} "
            f"(set {ENV_VAR} to a replacement file)"
        )
    return PACKAGED_DEFAULTS


def _read() -> dict[str, Any]:
    path = _resolve_path()
    logger.debug(f"Loading defaults from {path}")
    with open(path, encoding="utf-8") as f:
        # an empty file parses to None
        return yaml.safe_load(f) or {}


def _loaded() -> dict[str, Any]:
    global _cache
    if _cache is None:
        _cache = _read()
    return _cache


def get_defaults() -> dict[str, Any]:
    """Shallow copy of the whole defaults mapping, keyed by section.

    Example:
        >>> get_defaults()['blocked']['block_capacity']
        5
    """
    return dict(_loaded())


def get_default(key_path: str, default: Any = None) -> Any:
    """Look up one value by dotted path, e.g. 'buffer.policy'.

    Args:
        key_path: Section and key names joined by '.'
        default: Returned when any part of the path is missing

    Example:
        >>> get_default('buffer.policy')
        'doubling'
        >>> get_default('buffer.colour', 'none')
        'none'
    """
    node: Any = _loaded()
    for part in key_path.split("."):
        if not isinstance(node, dict) or node.get(part) is None:
            return default
        node = node[part]
    return node


def reload_defaults() -> None:
    """Drop the cached mapping and read the defaults file again."""
    global _cache
    _cache = _read()
