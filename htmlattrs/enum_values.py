"""Reduce enums and stringable objects to attribute primitives."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable, List, Protocol, runtime_checkable

from .messages import Message


@runtime_checkable
class EnumLike(Protocol):
    """Anything that knows its own primitive attribute form."""

    def to_primitive(self) -> Any:
        ...


def _is_stringable(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def normalize_value(value: Any) -> Any:
    """Return the primitive form of ``value``.

    Enum members reduce to their value when it is a str/int/float and to
    their name otherwise. Scalars, ``None``, lists, tuples and mappings pass
    through unchanged. Objects defining their own ``__str__`` are stringified.
    Anything else raises ``TypeError``.
    """
    if isinstance(value, Enum):
        payload = value.value
        if isinstance(payload, (str, int, float)):
            return payload
        return value.name
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple, Mapping)):
        return value
    if isinstance(value, EnumLike):
        return value.to_primitive()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if _is_stringable(value):
        return str(value)
    raise TypeError(Message.VALUE_SHOULD_BE_ARRAY_SCALAR_NULL_ENUM.format(type(value).__name__))


def normalize_array(values: Iterable[Any]) -> List[Any]:
    return [normalize_value(item) for item in values]


__all__ = ["EnumLike", "normalize_array", "normalize_value"]
