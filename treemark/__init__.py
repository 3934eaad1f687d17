"""Compile nested element trees into HTML or XML markup."""

from .compiler import compile_tree, preview, render, render_flat
from .config import RenderOptions, load_options
from .errors import (
    ConfigError,
    EvaluationError,
    InvalidTagError,
    MalformedAttributeListError,
    ReadError,
    TreeFormatError,
    TreemarkError,
    VoidElementError,
)
from .nodes import Element, Expr, Nested, Number, Tag, Text
from .reader import Symbol, read
from .reformat import indent, reformat

__all__ = [
    "ConfigError",
    "Element",
    "EvaluationError",
    "Expr",
    "InvalidTagError",
    "MalformedAttributeListError",
    "Nested",
    "Number",
    "ReadError",
    "RenderOptions",
    "Symbol",
    "Tag",
    "Text",
    "TreeFormatError",
    "TreemarkError",
    "VoidElementError",
    "compile_tree",
    "indent",
    "load_options",
    "preview",
    "read",
    "reformat",
    "render",
    "render_flat",
]
