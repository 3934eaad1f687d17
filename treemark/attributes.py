"""Attribute shorthand parsing, class merging and attribute formatting.

Shorthand tokens lead an element's argument list:

* ``@name`` sets ``id="name"``
* ``.name`` adds ``name`` to ``class`` (may repeat)
* ``:name value`` sets ``name="value"`` when the next item is text or a
  number, otherwise ``:name`` is a boolean attribute
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from .errors import MalformedAttributeListError
from .nodes import Item, Number, Tag, Text, Value

AttributeValue = Optional[Union[str, int, float]]
Attribute = Tuple[str, AttributeValue]

SIGILS = ("@", ".", ":")


def shorthand(value: Value) -> Optional[Tuple[str, str]]:
    """Split a shorthand token into ``(sigil, name)`` or return None."""

    if not isinstance(value, (Text, Tag)):
        return None
    text = value.text
    if len(text) < 2 or text[0] not in SIGILS:
        return None
    return text[0], text[1:]


def parse_attributes(
    args: Sequence[Item], resolve: Callable[[Item], Value]
) -> Tuple[int, List[Attribute]]:
    """Parse the leading shorthand tokens of ``args``.

    Returns the number of items consumed and the attribute list before
    class merging. Everything after the consumed prefix is children.
    """

    attributes: List[Attribute] = []
    pos = 0
    while pos < len(args):
        token = shorthand(resolve(args[pos]))
        if token is None:
            break
        sigil, name = token
        if sigil == "@":
            attributes.append(("id", name))
            pos += 1
        elif sigil == ".":
            attributes.append(("class", name))
            pos += 1
        else:
            following = resolve(args[pos + 1]) if pos + 1 < len(args) else None
            if isinstance(following, (Text, Number)):
                attributes.append((name, following.value))
                pos += 2
            else:
                attributes.append((name, None))
                pos += 1
    return pos, attributes


def as_pairs(attributes: Sequence[Any]) -> List[Attribute]:
    """Accept ``(key, value)`` pairs or a flat ``[key, value, ...]`` list."""

    if all(isinstance(item, tuple) and len(item) == 2 for item in attributes):
        return [(str(key), value) for key, value in attributes]
    if len(attributes) % 2:
        raise MalformedAttributeListError(
            f"attribute list has odd length {len(attributes)}: "
            f"{attributes[-1]!r} has no value slot"
        )
    return [(str(attributes[i]), attributes[i + 1]) for i in range(0, len(attributes), 2)]


def value_text(value: Union[str, int, float]) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Number(value).text
    return str(value)


def merge_classes(attributes: Sequence[Any]) -> List[Attribute]:
    """Combine every ``class`` entry into the first one, space separated."""

    pairs = as_pairs(attributes)
    positions = [i for i, (key, _) in enumerate(pairs) if key == "class"]
    if len(positions) < 2:
        return pairs
    values = [value_text(pairs[i][1]) for i in positions if pairs[i][1] is not None]
    # only boolean entries: the merged class stays boolean
    merged = " ".join(values) if values else None
    first = positions[0]
    dropped = set(positions[1:])
    return [
        ("class", merged) if i == first else pair
        for i, pair in enumerate(pairs)
        if i not in dropped
    ]


def format_attributes(attributes: Sequence[Any]) -> str:
    parts: List[str] = []
    for key, value in as_pairs(attributes):
        if value is None:
            parts.append(f" {key}")
        else:
            parts.append(f' {key}="{value_text(value)}"')
    return "".join(parts)


__all__ = [
    "Attribute",
    "AttributeValue",
    "as_pairs",
    "format_attributes",
    "merge_classes",
    "parse_attributes",
    "shorthand",
]
