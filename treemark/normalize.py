"""Convert raw tree literals into canonical nodes."""

from __future__ import annotations

import re
from typing import Any, List

from .errors import TreeFormatError
from .nodes import Element, Expr, Item, Nested, Number, Tag, Text, Value
from .reader import Symbol

_EXPR_RE = re.compile(r"\{\{((?:(?!\}\}).)*)\}\}", re.DOTALL)
_NODE_TYPES = (Text, Number, Tag, Nested, Expr)


def to_item(obj: Any) -> Item:
    """Canonical item for one raw argument of an element."""

    if isinstance(obj, _NODE_TYPES):
        return obj
    if isinstance(obj, Element):
        return Nested(obj)
    if isinstance(obj, Symbol):
        return Tag(str(obj))
    if isinstance(obj, str):
        match = _EXPR_RE.fullmatch(obj.strip())
        if match:
            return Expr(match.group(1).strip())
        return Text(obj)
    # bool is an int subclass but has no markup form
    if isinstance(obj, bool) or obj is None:
        raise TreeFormatError(f"unsupported value in tree: {obj!r}")
    if isinstance(obj, (int, float)):
        return Number(obj)
    if isinstance(obj, (list, tuple)):
        return Nested(normalize(obj))
    raise TreeFormatError(f"unsupported value in tree: {obj!r}")


def normalize(tree: Any) -> Element:
    """Return the canonical element for a raw ``(tag item ...)`` literal."""

    if isinstance(tree, Element):
        return tree
    if isinstance(tree, Nested):
        return tree.value
    if not isinstance(tree, (list, tuple)):
        raise TreeFormatError(f"element must be a list, got {type(tree).__name__}")
    if not tree:
        raise TreeFormatError("element must start with a tag name")
    head, *rest = tree
    if not isinstance(head, str):
        raise TreeFormatError(f"tag name must be a string, got {head!r}")
    args: List[Item] = [to_item(obj) for obj in rest]
    return Element(tag=str(head), args=tuple(args))


def to_value(obj: Any) -> Value:
    """Normalize an evaluated result; strings are taken literally."""

    if isinstance(obj, str) and not isinstance(obj, Symbol):
        return Text(obj)
    item = to_item(obj)
    if isinstance(item, Expr):
        raise TreeFormatError(f"expression evaluated to another expression: {obj!r}")
    return item


__all__ = ["normalize", "to_item", "to_value"]
