"""Jinja integration for rendering attribute maps inside templates."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from jinja2 import Environment
from markupsafe import Markup

from .attributes import render


def html_attrs(value: Optional[Mapping[str, Any]], encode: bool = True) -> Markup:
    """Render ``value`` as attributes marked safe for autoescaping templates.

    Usage: ``<input{{ field_attrs|html_attrs }}>``.
    """
    if not value:
        return Markup("")
    return Markup(render(value, encode=encode))


def install_filters(env: Environment) -> Environment:
    env.filters["html_attrs"] = html_attrs
    return env


__all__ = ["html_attrs", "install_filters"]
