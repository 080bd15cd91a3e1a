"""Normalize attribute maps and render them as escaped HTML attribute strings.

Attributes are emitted in a fixed priority order (``class``, ``id``, ``name``
and so on, unknown names last in their original order). Compound values
expand according to the attribute family:

- ``class``: list entries joined by a space.
- ``style``: mapping rendered as ``prop: value;`` declarations.
- ``data``, ``aria``, ``data-ng``, ``ng``: one ``<family>-<key>`` attribute
  per mapping entry.
- ``on``: one ``on<event>`` attribute per mapping entry.

Any other list or mapping is JSON-encoded into a single value.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, List, Tuple, Union

from . import encode as _encode
from .enum_values import normalize_value
from .messages import Message
from .types_attrs import AttributeMap, Lazy, NormalizedAttributes

ORDER_MAP: Mapping[str, int] = MappingProxyType(
    {
        name: rank
        for rank, name in enumerate(
            (
                "class",
                "id",
                "name",
                "type",
                "http-equiv",
                "value",
                "href",
                "src",
                "for",
                "title",
                "alt",
                "role",
                "tabindex",
                "srcset",
                "form",
                "action",
                "method",
                "selected",
                "checked",
                "readonly",
                "disabled",
                "multiple",
                "size",
                "maxlength",
                "width",
                "height",
                "rows",
                "cols",
                "rel",
                "as",
                "media",
                "data",
                "style",
                "aria",
                "data-ng",
                "ng",
            )
        )
    }
)

_UNRANKED = len(ORDER_MAP)

# Families whose mapping values expand into ``<family>-<key>`` attributes.
_HYPHEN_FAMILIES = frozenset({"aria", "data", "data-ng", "ng"})
_EVENT_FAMILY = "on"

_VALID_ATTRIBUTE_NAME = re.compile(r"[a-zA-Z_][a-zA-Z0-9_-]*")

_QUOTE_DOUBLE = '"'
_QUOTE_SINGLE = "'"

_JSON_SEPARATORS = (",", ":")
_JSON_HEX = {char: "\\u%04X" % ord(char) for char in "<>&'\""}
# Backslash escapes are matched as pairs so an escaped backslash is never
# mistaken for the start of an escaped quote.
_JSON_HTML_UNSAFE = re.compile(r"\\.|[<>&']")

Processed = Union[str, bool, "dict[str, str]"]


def is_valid_attribute_name(name: str) -> bool:
    return name in ORDER_MAP or _VALID_ATTRIBUTE_NAME.fullmatch(name) is not None


def sort_attributes(attributes: AttributeMap) -> List[Tuple[Any, Any]]:
    """Order items by ``ORDER_MAP`` rank; unranked names keep input order."""
    return sorted(
        ((_sanitize_key(name), value) for name, value in attributes.items()),
        key=lambda item: ORDER_MAP.get(item[0], _UNRANKED),
    )


def normalize_key(key: Any, prefix: str) -> str:
    """Normalize ``key`` and make sure it starts with ``prefix``.

    ``normalize_key("label", "aria-")`` gives ``"aria-label"`` while
    ``normalize_key("onclick", "on")`` is returned unchanged.
    """
    normalized = normalize_value(key)
    if not isinstance(normalized, str) or normalized == "":
        raise ValueError(Message.KEY_MUST_BE_NON_EMPTY_STRING.format())
    if normalized.startswith(prefix):
        return normalized
    return f"{prefix}{normalized}"


def _json_hex(match: re.Match) -> str:
    token = match.group(0)
    if token == '\\"':
        return _JSON_HEX['"']
    if len(token) == 2:
        return token
    return _JSON_HEX[token]


def _to_json(value: Any, encode: bool) -> str:
    text = json.dumps(value, ensure_ascii=False, separators=_JSON_SEPARATORS)
    if not encode:
        return text
    return _JSON_HTML_UNSAFE.sub(_json_hex, text)


def _sanitize_key(key: Any) -> Any:
    if isinstance(key, Enum):
        return normalize_value(key)
    return key


def _sanitize(value: Any, encode: bool, double_encode: bool, charset: str) -> Any:
    """Resolve lazy values and enums recursively, escaping strings if asked."""
    if isinstance(value, Lazy):
        return _sanitize(value.resolve(), encode, double_encode, charset)
    if callable(value) and not isinstance(value, (type, Enum)):
        return _sanitize(value(), encode, double_encode, charset)
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode(charset, errors="replace")

    value = normalize_value(value)

    if isinstance(value, Mapping):
        return {
            _sanitize_key(key): _sanitize(item, encode, double_encode, charset)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_sanitize(item, encode, double_encode, charset) for item in value]
    if isinstance(value, str) and encode:
        return _encode.value(value, double_encode, charset)
    return value


def _class_value(values: Any) -> str:
    entries: Iterable[Any] = values.values() if isinstance(values, Mapping) else values
    parts: list[str] = []
    for entry in entries:
        if isinstance(entry, (list, Mapping)):
            nested = _class_value(entry)
            if nested:
                parts.append(nested)
            continue
        # False/True come from ``cond and "name"`` idioms; neither is a class.
        if entry is None or entry == "" or isinstance(entry, bool):
            continue
        parts.append(str(entry))
    return " ".join(parts)


def _style_declaration_value(item: Any, encode: bool) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    if isinstance(item, (int, float)) and not isinstance(item, bool):
        return str(item)
    return _to_json(item, encode)


def _style_value(values: Any, encode: bool, double_encode: bool, charset: str) -> str:
    result = ""
    if isinstance(values, Mapping):
        for prop, item in values.items():
            if item is None:
                continue
            name = _encode.value(str(prop), double_encode, charset) if encode else str(prop)
            declaration = _style_declaration_value(item, encode)
            if declaration != "":
                result += f"{name}: {declaration}; "
    else:
        for fragment in values:
            if not isinstance(fragment, str):
                continue
            fragment = fragment.strip().rstrip(";").strip()
            if fragment:
                result += f"{fragment}; "
    return result.rstrip()


def _family_value(family: str, values: Any, encode: bool) -> dict[str, str]:
    expanded: dict[str, str] = {}
    if not isinstance(values, Mapping):
        return expanded
    for key, item in values.items():
        if item is None:
            continue
        if not isinstance(key, str) or not is_valid_attribute_name(key):
            continue
        if family == _EVENT_FAMILY:
            name = normalize_key(key, _EVENT_FAMILY)
        else:
            name = f"{family}-{key}"
        expanded[name] = item if isinstance(item, str) else _to_json(item, encode)
    return expanded


def _normalize_attribute_value(
    name: str,
    raw: Any,
    encode: bool,
    double_encode: bool,
    charset: str,
) -> Processed:
    value = _sanitize(raw, encode, double_encode, charset)

    if value is None or (isinstance(value, str) and value == ""):
        return ""
    if isinstance(value, bool):
        return True if value else ""

    if isinstance(value, (Mapping, list)):
        if name == "class":
            return _class_value(value)
        if name in _HYPHEN_FAMILIES or name == _EVENT_FAMILY:
            return _family_value(name, value, encode)
        if name == "style":
            return _style_value(value, encode, double_encode, charset)
        return _to_json(value, encode)

    if isinstance(value, str):
        return value
    return _to_json(value, encode)


def normalize_attributes(
    attributes: AttributeMap,
    *,
    encode: bool = True,
    double_encode: bool = True,
    charset: str = "utf-8",
) -> NormalizedAttributes:
    """Flatten ``attributes`` into ordered ``name -> value`` pairs.

    Values are final strings, or ``True`` for boolean attributes that render
    as a bare name. Pass ``encode=False`` when the result goes to an API that
    escapes on its own (a DOM builder, for instance); strings are then left
    untouched and JSON is not hex-escaped.
    """
    if not isinstance(attributes, Mapping):
        raise TypeError(Message.ATTRIBUTES_MUST_BE_MAPPING.format(type(attributes).__name__))

    normalized: NormalizedAttributes = {}
    for name, raw in sort_attributes(attributes):
        if not isinstance(name, str) or raw is None:
            continue
        if isinstance(raw, str) and raw == "":
            continue
        if not is_valid_attribute_name(name):
            continue

        processed = _normalize_attribute_value(name, raw, encode, double_encode, charset)
        if isinstance(processed, dict):
            normalized.update(processed)
        elif processed != "":
            normalized[name] = processed
    return normalized


def render_attribute(name: str, value: Union[str, bool]) -> str:
    if value is True:
        return f" {name}"
    quote = _QUOTE_DOUBLE
    if name == "style" or (isinstance(value, str) and value.startswith(("{", "["))):
        quote = _QUOTE_SINGLE
    return f" {name}={quote}{value}{quote}"


def render(
    attributes: AttributeMap,
    *,
    encode: bool = True,
    double_encode: bool = True,
    charset: str = "utf-8",
) -> str:
    """Render ``attributes`` as a string ready to follow a tag name.

    The result is empty or starts with a space::

        render({"id": "z", "class": ["a", "b"], "disabled": True})
        # ' class="a b" id="z" disabled'
    """
    normalized = normalize_attributes(
        attributes,
        encode=encode,
        double_encode=double_encode,
        charset=charset,
    )
    return "".join(render_attribute(name, value) for name, value in normalized.items())


__all__ = [
    "ORDER_MAP",
    "is_valid_attribute_name",
    "normalize_attributes",
    "normalize_key",
    "render",
    "render_attribute",
    "sort_attributes",
]
