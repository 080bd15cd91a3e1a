"""In-place helpers for caller-owned attribute dictionaries.

Values are stored as given (closures, enums and booleans stay raw); only the
renderer decides how they end up in markup.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .enum_values import normalize_value
from .messages import Message

AttributeBag = Dict[str, Any]


def _normalize_key(key: Any) -> str:
    normalized = normalize_value(key)
    if not isinstance(normalized, str) or normalized == "":
        raise ValueError(Message.KEY_MUST_BE_NON_EMPTY_STRING.format())
    return normalized


def set(bag: AttributeBag, key: Any, value: Any) -> None:  # noqa: A001
    """Store ``value`` under ``key``; ``None`` removes the key instead."""
    normalized = _normalize_key(key)
    if value is None:
        bag.pop(normalized, None)
        return
    bag[normalized] = value


add = set


def get(bag: Mapping[str, Any], key: Any, default: Any = None) -> Any:
    return bag.get(_normalize_key(key), default)


def remove(bag: AttributeBag, key: Any) -> None:
    bag.pop(_normalize_key(key), None)


def merge(bag: AttributeBag, values: Mapping[str, Any]) -> None:
    """Override ``bag`` with ``values`` as-is; ``None`` values are kept."""
    bag.update(values)


def set_many(bag: AttributeBag, values: Mapping[Any, Any]) -> None:
    for key, value in values.items():
        if not isinstance(key, str):
            raise ValueError(Message.KEY_MUST_BE_NON_EMPTY_STRING.format())
        set(bag, key, value)


__all__ = ["AttributeBag", "add", "get", "merge", "remove", "set", "set_many"]
