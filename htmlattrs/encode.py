"""HTML entity encoding for tag content and quoted attribute values."""

from __future__ import annotations

import re
from html.entities import html5
from typing import Union

TextLike = Union[str, bytes, bytearray]

_CONTENT_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}

_VALUE_ENTITIES = {
    **_CONTENT_ENTITIES,
    '"': "&quot;",
    "'": "&apos;",
    "\0": chr(0xFFFD),
}

# Matches an existing named, decimal or hex character reference.
_ENTITY = r"&(?:[a-zA-Z][a-zA-Z0-9]*|#[0-9]+|#[xX][0-9a-fA-F]+);"

_CONTENT_RE = re.compile(r"[&<>]")
_CONTENT_KEEP_RE = re.compile(f"({_ENTITY})|[&<>]")
_VALUE_RE = re.compile("[&<>\"'\0]")
_VALUE_KEEP_RE = re.compile(f"({_ENTITY})|[&<>\"'\0]")


def _as_text(text: TextLike, charset: str) -> str:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode(charset, errors="replace")
    return text


def _escape(text: str, table: dict[str, str], pattern: re.Pattern, keep: re.Pattern, double_encode: bool) -> str:
    if double_encode:
        return pattern.sub(lambda match: table[match.group(0)], text)

    def _replace(match: re.Match) -> str:
        reference = match.group(1)
        if reference:
            if reference[1] == "#" or reference[1:] in html5:
                return reference
            return f"&amp;{reference[1:]}"
        return table[match.group(0)]

    return keep.sub(_replace, text)


def content(text: TextLike, double_encode: bool = True, charset: str = "utf-8") -> str:
    """Escape ``&``, ``<`` and ``>`` for use as tag body text.

    Quotes are left alone since they are harmless outside attribute values.
    """
    return _escape(_as_text(text, charset), _CONTENT_ENTITIES, _CONTENT_RE, _CONTENT_KEEP_RE, double_encode)


def value(
    raw: TextLike | int | float | None,
    double_encode: bool = True,
    charset: str = "utf-8",
) -> str:
    """Escape a value for a quoted attribute context.

    Covers ``& < > " '`` using HTML5 entities. NUL is replaced with U+FFFD,
    the way HTML parsers treat it, instead of being passed through verbatim.
    ``None`` becomes an empty string and numbers are stringified first.
    With ``double_encode=False`` existing character references such as
    ``&amp;`` or ``&#39;`` are left untouched; unknown names like ``&bogus;``
    still get their ampersand escaped.
    """
    if raw is None:
        return ""
    if isinstance(raw, (bytes, bytearray, str)):
        text = _as_text(raw, charset)
    else:
        text = str(raw)
    return _escape(text, _VALUE_ENTITIES, _VALUE_RE, _VALUE_KEEP_RE, double_encode)


__all__ = ["content", "value"]
