"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "documentation": {
        "extension": ".xml",
        "culture": None,
        "raise_on_parse_error": False,
    },
}


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge `update` over `base`, recursing into nested mappings."""
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_config(current, value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Return DEFAULT_CONFIG overlaid with the YAML file at `path`, if it exists.

    An empty file counts as no overrides. A file whose top level is not a mapping
    raises ValueError.
    """
    defaults = copy.deepcopy(DEFAULT_CONFIG)
    if not path or not Path(path).exists():
        return defaults

    with open(path, encoding="utf-8") as f:
        overrides = yaml.safe_load(f)
    if overrides is None:
        return defaults
    if not isinstance(overrides, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return merge_config(defaults, overrides)
