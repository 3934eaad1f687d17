"""Tag registry: standard HTML5 elements, extensions and empty elements."""

from __future__ import annotations

from typing import AbstractSet

HTML5_TAGS = frozenset(
    """
    a abbr address area article aside audio b base bdi bdo blockquote body br
    button canvas caption cite code col colgroup data datalist dd del details
    dfn dialog div dl dt em embed fieldset figcaption figure footer form h1 h2
    h3 h4 h5 h6 head header hgroup hr html i iframe img input ins kbd label
    legend li link main map mark menu meta meter nav noscript object ol
    optgroup option output p param picture pre progress q rp rt ruby s samp
    script search section select slot small source span strong style sub
    summary sup table tbody td template textarea tfoot th thead time title tr
    track u ul var video wbr
    """.split()
)

# Always rendered self-closing in HTML mode.
VOID_TAGS = frozenset(
    "area base br col embed hr img input link meta param source track wbr".split()
)

DEFAULT_EXTENSION_TAGS = frozenset(
    """
    svg g defs use symbol path circle ellipse line polyline polygon rect
    text tspan linearGradient radialGradient stop clipPath mask math mi mn mo
    mrow msup msub mfrac msqrt
    """.split()
)


def is_known_tag(tag: str, extension_tags: AbstractSet[str] = DEFAULT_EXTENSION_TAGS) -> bool:
    return tag in HTML5_TAGS or tag in extension_tags


def is_void_tag(tag: str) -> bool:
    return tag in VOID_TAGS


__all__ = [
    "DEFAULT_EXTENSION_TAGS",
    "HTML5_TAGS",
    "VOID_TAGS",
    "is_known_tag",
    "is_void_tag",
]
