"""Reader for s-expression tree sources and tree files."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Iterator, List, Tuple

import yaml

from .errors import ReadError, TreeFormatError


class Symbol(str):
    """Bare word read from source, as opposed to a quoted string."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


_TOKEN_RE = re.compile(
    r"""
    (?P<space>\s+)
    |(?P<comment>;[^\n]*)
    |(?P<open>[(\[])
    |(?P<close>[)\]])
    |(?P<string>"(?:[^"\\]|\\.)*")
    |(?P<unterminated>")
    |(?P<atom>[^\s()\[\]";]+)
    """,
    re.VERBOSE | re.DOTALL,
)
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")
_ESCAPES = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}
_PAIRS = {"(": ")", "[": "]"}


def _tokens(source: str) -> Iterator[Tuple[str, str, int]]:
    line = 1
    for match in _TOKEN_RE.finditer(source):
        kind = match.lastgroup or ""
        text = match.group()
        if kind == "unterminated":
            raise ReadError("unterminated string", line)
        if kind not in ("space", "comment"):
            yield kind, text, line
        line += text.count("\n")


def _unquote(literal: str, line: int) -> str:
    chars: List[str] = []
    body = iter(literal[1:-1])
    for ch in body:
        if ch != "\\":
            chars.append(ch)
            continue
        escaped = next(body)
        if escaped not in _ESCAPES:
            raise ReadError(f"unknown escape \\{escaped}", line)
        chars.append(_ESCAPES[escaped])
    return "".join(chars)


def _atom(text: str) -> Any:
    if _NUMBER_RE.fullmatch(text):
        if text.lstrip("+-").isdigit():
            return int(text)
        return float(text)
    return Symbol(text)


def read_all(source: str) -> List[Any]:
    """Read every top-level form in ``source``."""

    forms: List[Any] = []
    stack: List[Tuple[str, int, List[Any]]] = []
    for kind, text, line in _tokens(source):
        if kind == "open":
            stack.append((text, line, []))
            continue
        if kind == "close":
            if not stack:
                raise ReadError(f"unexpected {text!r}", line)
            opener, _, items = stack.pop()
            if _PAIRS[opener] != text:
                raise ReadError(f"{opener!r} closed by {text!r}", line)
            value: Any = items
        elif kind == "string":
            value = _unquote(text, line)
        else:
            value = _atom(text)
        if stack:
            stack[-1][2].append(value)
        else:
            forms.append(value)
    if stack:
        opener, line, _ = stack[-1]
        raise ReadError(f"unclosed {opener!r}", line)
    return forms


def read(source: str) -> Any:
    """Read exactly one form from ``source``."""

    forms = read_all(source)
    if len(forms) != 1:
        raise ReadError(f"expected one form, found {len(forms)}", 1)
    return forms[0]


def load_tree(path: Path) -> Any:
    """Load a raw tree literal from an s-expression, JSON or YAML file."""

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json.loads(text)
    if suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text)
        if data is None:
            raise TreeFormatError(f"{path} is empty")
        return data
    return read(text)


__all__ = ["Symbol", "load_tree", "read", "read_all"]
