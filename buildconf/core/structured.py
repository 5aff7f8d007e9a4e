"""Helpers for reading untyped TOML tables.

The manifest and secrets files are parsed with ``tomllib`` into plain dicts;
these helpers validate shapes at that boundary and narrow types.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripped.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_int(table: Mapping[str, object], key: str) -> int | None:
    value = table.get(key)
    # bool is an int subclass; TOML booleans are not SDK levels.
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    value = table.get(key)
    if not isinstance(value, bool):
        return None
    return value


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    return as_str_dict(table.get(key))


def get_list(table: Mapping[str, object], key: str) -> ObjList | None:
    value = table.get(key)
    if isinstance(value, list):
        return cast(ObjList, value)
    return None


def get_str_tuple(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    """Get a list of strings as a tuple.

    Non-string items are dropped. Returns None when the key is missing.
    """
    items = get_list(table, key)
    if items is None:
        return None
    return tuple(item.strip() for item in items if isinstance(item, str) and item.strip())


def get_tables(table: Mapping[str, object], key: str) -> list[StrDict]:
    """Get an array of tables (``[[key]]``), skipping malformed entries."""
    items = get_list(table, key) or []
    out: list[StrDict] = []
    for item in items:
        d = as_str_dict(item)
        if d is not None:
            out.append(d)
    return out
