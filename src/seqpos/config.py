"""
Library settings.

A small set of knobs for the traversal and copy algorithms. There is no
process-wide state: callers pass a Settings object to the calls that use it
(distance, copy_into, copy_n_into). Settings can be built in code or
loaded from a YAML mapping:

    distance_scan_limit: 100000   # bound for non-random-access distance()
    check_aliasing: true          # reject unsafe self-copies up front

Unknown keys are rejected in strict mode and warned about otherwise.
"""

from __future__ import annotations

import dataclasses
import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """
    Properties:
        distance_scan_limit:
            Maximum number of steps distance() takes on ForwardOnly and
            Bidirectional positions before raising Unreachable.
            None means no bound beyond the end sentinel.

        check_aliasing:
            If True, copy_into() rejects self-copies the destination
            cannot tolerate before writing anything.
    """

    distance_scan_limit: Optional[int] = None
    check_aliasing: bool = True

    def replace(self, **overrides: Any) -> Settings:
        """Return a copy with `overrides` applied, validated like a settings file."""
        merged = dataclasses.asdict(self)
        merged.update(overrides)
        return settings_from_dict(merged)


_FIELD_TYPES = {
    "distance_scan_limit": (int, type(None)),
    "check_aliasing": (bool,),
}


def settings_from_dict(d: Optional[Dict[str, Any]], strict: bool = True) -> Settings:
    if d is None:
        return Settings()
    if not isinstance(d, dict):
        raise TypeError(f"Settings must be a mapping, got {type(d).__name__}")

    values: Dict[str, Any] = {}
    for key, value in d.items():
        if key not in _FIELD_TYPES:
            if strict:
                raise KeyError(f"Unknown setting '{key}'")
            warnings.warn(f"Ignoring unknown setting '{key}'", UserWarning)
            continue
        expected = _FIELD_TYPES[key]
        # bool is an int subclass; keep the two apart
        if isinstance(value, bool) and bool not in expected:
            raise TypeError(f"Setting '{key}' expects {expected[0].__name__}, got bool")
        if not isinstance(value, expected):
            raise TypeError(
                f"Setting '{key}' expects {expected[0].__name__}, got {type(value).__name__}"
            )
        values[key] = value

    limit = values.get("distance_scan_limit")
    if limit is not None and limit < 0:
        raise ValueError("distance_scan_limit must be non-negative")
    return Settings(**values)


def settings_from_yaml(text: str, strict: bool = True) -> Settings:
    return settings_from_dict(yaml.safe_load(text), strict=strict)


def load_settings(path: Union[str, Path], strict: bool = True) -> Settings:
    """
    Load settings from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: Unknown key in strict mode
        TypeError: Value of the wrong type
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    settings = settings_from_yaml(path.read_text(encoding="utf-8"), strict=strict)
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings
