"""Helpers for safely working with dynamic (untyped) structures.

Use these at boundaries where we ingest JSON (the release index) or TOML
(the config file). They validate at runtime and narrow types for the
checker.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def is_obj_list(obj: object) -> TypeGuard[ObjList]:
    """Return True if obj is a list."""
    return isinstance(obj, list)


def as_obj_list(obj: object) -> ObjList | None:
    """Return obj as ObjList if it matches, else None."""
    if is_obj_list(obj):
        return obj
    return None


def as_str_list(obj: object) -> list[str] | None:
    """Return a new list if obj is a list of strings, else None."""
    items = as_obj_list(obj)
    if items is None:
        return None
    out: list[str] = []
    for item in items:
        if not isinstance(item, str):
            return None
        out.append(item)
    return out


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value from a mapping, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_float(table: Mapping[str, object], key: str) -> float | None:
    """Get a number from a mapping as float (bools are rejected)."""
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return float(value)


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    value = table.get(key)
    return as_str_dict(value)
