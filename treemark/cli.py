"""Command-line interface for treemark."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable, Optional

import yaml

from .compiler import compile_tree, preview
from .config import RenderOptions, load_options
from .errors import TreemarkError
from .io_utils import load_context, read_markup, read_tree, warn, write_output
from .reformat import reformat


def _options_from_args(args: argparse.Namespace) -> RenderOptions:
    options = load_options(Path(args.config)) if args.config else RenderOptions()
    update: dict = {}
    if getattr(args, "doctype", None):
        update["doctype"] = tuple(args.doctype)
    if getattr(args, "extension_tags", None):
        update["extension_tags"] = options.extension_tags | frozenset(args.extension_tags)
    if update:
        options = options.model_copy(update=update)
    return options


def _context_from_args(args: argparse.Namespace) -> dict:
    return load_context(Path(args.context)) if args.context else {}


def _xml_flag(args: argparse.Namespace) -> Optional[bool]:
    return True if args.xml else None


def _handle_render(args: argparse.Namespace) -> None:
    text = compile_tree(
        read_tree(args.input),
        _xml_flag(args),
        options=_options_from_args(args),
        context=_context_from_args(args),
    )
    write_output(args.output, text)


def _handle_reformat(args: argparse.Namespace) -> None:
    write_output(args.output, reformat(read_markup(args.input), xml=args.xml))


def _handle_preview(args: argparse.Namespace) -> None:
    preview(
        read_tree(args.input),
        _xml_flag(args),
        options=_options_from_args(args),
        context=_context_from_args(args),
    )


def _add_tree_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        help="Tree file (.sexp, .json, .yaml) or - to read s-expression text from stdin.",
    )
    parser.add_argument(
        "--xml",
        action="store_true",
        help="Render XML: paired tags and an XML declaration line.",
    )
    parser.add_argument(
        "--config",
        help="YAML file with render options (xml, doctypeParams, extensionTags, xmlHeader).",
    )
    parser.add_argument(
        "--context",
        help="JSON or YAML mapping of names used by {{ expression }} items.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treemark", description="Compile element trees into HTML or XML markup."
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Compile a tree into line-broken markup.",
        description="Render a tree file into HTML (default) or XML markup.",
    )
    _add_tree_arguments(render_parser)
    render_parser.add_argument(
        "--doctype",
        nargs="+",
        help="Words written after DOCTYPE for an html root (default: html).",
    )
    render_parser.add_argument(
        "--extension-tag",
        dest="extension_tags",
        action="append",
        help="Allow an extra tag name; may be repeated.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        help="File to write; defaults to stdout.",
    )
    render_parser.set_defaults(func=_handle_render)

    reformat_parser = subparsers.add_parser(
        "reformat",
        help="Break existing markup into lines by element structure.",
        description="Reformat rendered HTML or XML text.",
    )
    reformat_parser.add_argument("input", help="Markup file or - for stdin.")
    reformat_parser.add_argument(
        "--xml",
        action="store_true",
        help="Treat input as XML (only tags ending in /> are empty).",
    )
    reformat_parser.add_argument(
        "--out",
        dest="output",
        help="File to write; defaults to stdout.",
    )
    reformat_parser.set_defaults(func=_handle_reformat)

    preview_parser = subparsers.add_parser(
        "preview",
        help="Compile a tree and print it indented.",
        description="Render a tree and show it with indentation.",
    )
    _add_tree_arguments(preview_parser)
    preview_parser.set_defaults(func=_handle_preview)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not hasattr(args, "func"):
        parser.print_help()
        return
    try:
        args.func(args)
    except (TreemarkError, OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        warn(f"treemark: {exc}")
        raise SystemExit(1) from exc


__all__ = ["build_parser", "main"]
