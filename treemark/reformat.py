"""Line breaking for already rendered markup text.

Compiling a tree breaks lines while rendering (see ``Renderer``); this module
does the same for markup that only exists as text, such as a file rendered
earlier or by another tool. For rendered trees both give identical output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .tags import is_void_tag

_MARKUP_RE = re.compile(
    r"""
    (?P<decl><!--.*?-->|<![^>]*>|<\?.*?\?>)
    |<(?P<close>/)?(?P<name>[^\s/>!?]+)(?P<rest>(?:[^>"']|"[^"]*"|'[^']*')*)>
    """,
    re.VERBOSE | re.DOTALL,
)


@dataclass(frozen=True)
class Token:
    kind: str  # text, decl, open, close or empty
    text: str
    name: str = ""


def tokenize(markup: str, *, xml: bool = False) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    for match in _MARKUP_RE.finditer(markup):
        if match.start() > pos:
            tokens.append(Token("text", markup[pos : match.start()]))
        pos = match.end()
        text = match.group()
        if match.group("decl"):
            tokens.append(Token("decl", text))
            continue
        name = match.group("name")
        if match.group("close"):
            tokens.append(Token("close", text, name))
        elif match.group("rest").rstrip().endswith("/") or (not xml and is_void_tag(name)):
            tokens.append(Token("empty", text, name))
        else:
            tokens.append(Token("open", text, name))
    if pos < len(markup):
        tokens.append(Token("text", markup[pos:]))
    return tokens


def _leaf_end(tokens: List[Token], start: int) -> Optional[int]:
    """Index of the matching closing tag if the element at ``start`` holds only text."""

    name = tokens[start].name
    for index in range(start + 1, len(tokens)):
        token = tokens[index]
        if token.kind == "close":
            return index if token.name == name else None
        if token.kind != "text":
            return None
    return None


def _layout(tokens: List[Token]) -> Iterator[Tuple[str, str]]:
    """Yield ``(line, kind)``; kind is ``open`` for an element with children,
    ``close`` for a closing tag and ``line`` for anything else."""

    pos = 0
    while pos < len(tokens):
        token = tokens[pos]
        if token.kind == "text":
            text = token.text.strip("\n")
            if text:
                yield text, "line"
            pos += 1
            continue
        if token.kind == "open":
            end = _leaf_end(tokens, pos)
            if end is not None:
                yield "".join(t.text for t in tokens[pos : end + 1]), "line"
                pos = end + 1
                continue
            yield token.text, "open"
        elif token.kind == "close":
            yield token.text, "close"
        else:
            yield token.text, "line"
        pos += 1


def reformat(markup: str, xml: bool = False) -> str:
    """Put every element boundary and text run of ``markup`` on its own line.

    An element containing other elements has its opening and closing tags on
    separate lines; an element holding only text stays whole on one line.
    Text runs lose leading and trailing newlines and are dropped when empty.
    Nothing inside tags is changed. Reformatting twice changes nothing.
    """

    return "\n".join(line for line, _ in _layout(tokenize(markup, xml=xml)))


def indent(markup: str, xml: bool = False, width: int = 2) -> str:
    """Reformat ``markup`` and indent each line by its element depth.

    Only leading spaces are added; tags and text are left as they are.
    """

    lines: List[str] = []
    depth = 0
    for line, kind in _layout(tokenize(markup, xml=xml)):
        if kind == "close":
            depth = max(depth - 1, 0)
        lines.append(" " * (width * depth) + line)
        if kind == "open":
            depth += 1
    return "\n".join(lines)


__all__ = ["Token", "indent", "reformat", "tokenize"]
