"""Command-line interface for htmlattrs."""

import argparse
import json
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml
from pydantic import ValidationError

from .attributes import normalize_attributes, render
from .io_utils import read_document, stable_json_dumps, warn
from .models import AttributeDocument, RenderOptions

_DOCUMENT_KEYS = {"attributes", "options"}


def _load_document(path: Path) -> AttributeDocument:
    try:
        data = read_document(path)
    except FileNotFoundError as exc:
        raise SystemExit(f"Input file not found: {path}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Could not parse {path}: {exc}") from exc

    if data is None:
        warn(f"{path} is empty; rendering no attributes.")
        data = {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of attributes.")

    is_document = bool(data) and set(data) <= _DOCUMENT_KEYS and isinstance(data.get("attributes", {}), dict)
    payload = data if is_document else {"attributes": data}
    try:
        return AttributeDocument.model_validate(payload)
    except ValidationError as exc:
        raise SystemExit(f"Invalid attribute document in {path}: {exc}") from exc


def _effective_options(document: AttributeDocument, args: argparse.Namespace) -> RenderOptions:
    overrides: dict[str, Any] = {}
    if args.raw:
        overrides["encode"] = False
    if args.no_double_encode:
        overrides["double_encode"] = False
    if args.charset:
        overrides["charset"] = args.charset
    if not overrides:
        return document.options
    return document.options.model_copy(update=overrides)


def _handle_render(args: argparse.Namespace) -> None:
    document = _load_document(Path(args.input))
    options = _effective_options(document, args)
    print(render(document.attributes, **options.as_kwargs()))


def _handle_normalize(args: argparse.Namespace) -> None:
    document = _load_document(Path(args.input))
    options = _effective_options(document, args)
    normalized = normalize_attributes(document.attributes, **options.as_kwargs())
    print(stable_json_dumps(normalized), end="")


def _add_render_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", help="YAML or JSON file holding an attribute mapping.")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Skip HTML escaping (for callers that escape downstream).",
    )
    parser.add_argument(
        "--no-double-encode",
        dest="no_double_encode",
        action="store_true",
        help="Leave existing HTML entities untouched.",
    )
    parser.add_argument(
        "--charset",
        default=None,
        help="Charset for decoding byte values (default: document option or utf-8).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlattrs",
        description="Render HTML attribute maps as escaped attribute strings",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="htmlattrs 0.1.0",
        help="Show the htmlattrs version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Print the rendered attribute string.",
    )
    _add_render_options(render_parser)
    render_parser.set_defaults(func=_handle_render)

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Print the normalized attribute mapping as JSON.",
    )
    _add_render_options(normalize_parser)
    normalize_parser.set_defaults(func=_handle_normalize)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
