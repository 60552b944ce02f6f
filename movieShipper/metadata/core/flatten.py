from __future__ import annotations
from typing import Any, Optional

from movieShipper.metadata.core.errors import ParseError

# ---------- Per-field caps used for the detail payload ----------
ACTOR_LIMIT    = 5
DIRECTOR_LIMIT = 5
NATION_LIMIT   = 5
GENRE_LIMIT: Optional[int]  = None      # unbounded
RATING_LIMIT: Optional[int] = None      # unbounded


def require(blob: dict, key: str, where: str) -> Any:
    """Return ``blob[key]`` or raise ParseError naming ``where.key``."""
    path = f"{where}.{key}" if where else key
    if not isinstance(blob, dict):
        raise ParseError(f"Expected an object at '{where or '<root>'}'", field=where or None)
    value = blob.get(key)
    if value is None:
        raise ParseError(f"Missing field '{path}'", field=path)
    return value


def require_text(blob: dict, key: str, where: str) -> str:
    value = require(blob, key, where)
    if isinstance(value, (dict, list)):
        path = f"{where}.{key}" if where else key
        raise ParseError(f"Field '{path}' is not a scalar", field=path)
    return str(value)


def flatten_named_list(items: Any, name_key: str, limit: Optional[int] = None, *, where: str = "") -> str:
    """
    Join ``item[name_key]`` for the first *limit* items with commas.

    *limit* ``None`` takes every item. An empty list gives ``""``.
    Raises ParseError when *items* is not a list of objects or an entry
    lacks *name_key*.
    """
    if not isinstance(items, list):
        raise ParseError(f"Field '{where or name_key}' is not an array", field=where or None)

    picked = items if limit is None else items[:limit]
    names = []
    for i, item in enumerate(picked):
        names.append(require_text(item, name_key, f"{where}[{i}]"))
    return ",".join(names)
