"""Attribute value type definitions."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Union

Scalar = Union[str, int, float]

# Caller-side value shapes accepted by the renderer. Compound values are only
# expanded under family names (class, style, data, aria, data-ng, ng, on);
# anywhere else they are JSON-encoded.
AttributeValue = Union[
    None,
    bool,
    Scalar,
    Enum,
    "Lazy",
    Callable[[], Any],
    List[Any],
    Mapping[str, Any],
]

AttributeMap = Mapping[str, Any]

# Final shape: string values, or True for bare boolean attributes.
NormalizedAttributes = Dict[str, Union[str, bool]]

_UNRESOLVED = object()


@dataclass
class Lazy:
    """Deferred attribute value computed on first use."""

    supplier: Callable[[], Any]
    _value: Any = field(default=_UNRESOLVED, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def resolve(self) -> Any:
        if self._value is _UNRESOLVED:
            with self._lock:
                if self._value is _UNRESOLVED:
                    self._value = self.supplier()
        return self._value

    def __call__(self) -> Any:
        return self.resolve()


__all__ = [
    "AttributeMap",
    "AttributeValue",
    "Lazy",
    "NormalizedAttributes",
    "Scalar",
]
