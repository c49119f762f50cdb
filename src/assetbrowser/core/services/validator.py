from __future__ import annotations

"""
Configuration Validation Service.

Turns untrusted configuration dictionaries (config file, CLI overrides) into
a clean, typed scan configuration. Invalid values are replaced by defaults
and reported as warnings unless strict mode is requested.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from assetbrowser.domain.config import DEFAULT_STACKS, get_default_config
from assetbrowser.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["input_path", "stack", "tree_file"]
_BOOL_FIELDS = ["show_progress", "json_output"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        stacks: Optional[Dict[str, List[str]]] = None,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a scan configuration.

    A non-empty 'stack' replaces 'extensions' with the named stack's list.
    'extensions' set explicitly to None is kept: it selects "any extension"
    mode.

    Args:
        config: Raw configuration data (usually a dictionary).
        stacks: Known extension stacks. Defaults to the built-in ones.
        strict: Raise on invalid values instead of coercing them.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on an unknown stack name.
    """
    warnings: List[str] = []
    defaults = get_default_config()
    known_stacks = stacks if stacks is not None else DEFAULT_STACKS

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)
    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["input_path"] = normalize_path(merged["input_path"], defaults["input_path"])

    if "extensions" in config and config["extensions"] is None:
        merged["extensions"] = None
    else:
        merged["extensions"] = _as_list_str(
            merged.get("extensions"), defaults["extensions"], "extensions", warnings, strict
        )

    stack = merged["stack"]
    if stack:
        if stack in known_stacks:
            merged["extensions"] = list(known_stacks[stack])
        else:
            msg = f"Unknown extension stack '{stack}'."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Ignored.")
            merged["stack"] = ""

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce 0/1 and common yes/no keywords into booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is an ordered list of stripped strings; CSV strings are split."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
            return items
        return list(fallback)

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        if not out:
            warnings.append(f"Field '{field}' is empty. Using fallback.")
            return list(fallback)
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)
