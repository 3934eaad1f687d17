"""Canonical node types for element trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union


@dataclass(frozen=True)
class Text:
    value: str

    @property
    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number:
    value: Union[int, float]

    @property
    def text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Tag:
    """Bare symbol, e.g. ``@main`` or ``hello`` read without quotes."""

    name: str

    @property
    def text(self) -> str:
        return self.name


@dataclass(frozen=True)
class Expr:
    """Embedded expression resolved by the evaluator at render time."""

    source: str


@dataclass(frozen=True)
class Element:
    tag: str
    args: Tuple["Item", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Nested:
    value: Element


Value = Union[Text, Number, Tag, Nested]
Item = Union[Text, Number, Tag, Nested, Expr]


__all__ = ["Element", "Expr", "Item", "Nested", "Number", "Tag", "Text", "Value"]
