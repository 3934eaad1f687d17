"""Compile element trees into readable HTML or XML text."""

from __future__ import annotations

import io
import logging
import sys
from typing import Any, Mapping, Optional, TextIO

from .config import RenderOptions
from .evaluator import Evaluator
from .normalize import normalize
from .reformat import indent
from .render import Renderer

logger = logging.getLogger(__name__)


def _compile(
    tree: Any,
    xml: Optional[bool],
    options: Optional[RenderOptions],
    context: Optional[Mapping[str, Any]],
    *,
    pretty: bool,
) -> str:
    root = normalize(tree)
    options = (options or RenderOptions()).with_mode(xml)
    with io.StringIO() as buffer:
        if options.xml:
            buffer.write(options.xml_header)
            if pretty:
                buffer.write("\n")
        Renderer(buffer, options, Evaluator(context), pretty=pretty).render(root, root=True)
        text = buffer.getvalue()
    if pretty:
        text = text.removesuffix("\n")
    logger.debug(
        "compiled <%s> as %s: %d characters", root.tag, "xml" if options.xml else "html", len(text)
    )
    return text


def compile_tree(
    tree: Any,
    xml: Optional[bool] = None,
    *,
    options: Optional[RenderOptions] = None,
    context: Optional[Mapping[str, Any]] = None,
) -> str:
    """Render ``tree`` and break it into lines by element structure.

    ``tree`` is a raw literal such as ``["div", "@main", ".a", "text"]`` or an
    already normalized ``Element``. ``xml`` overrides ``options.xml``.
    ``context`` supplies the names used by ``{{ expression }}`` items. Any
    error aborts the whole call and no partial output is returned.
    """

    return _compile(tree, xml, options, context, pretty=True)


def render_flat(
    tree: Any,
    xml: Optional[bool] = None,
    *,
    options: Optional[RenderOptions] = None,
    context: Optional[Mapping[str, Any]] = None,
) -> str:
    """Render ``tree`` without line breaks."""

    return _compile(tree, xml, options, context, pretty=False)


def preview(
    tree: Any,
    xml: Optional[bool] = None,
    *,
    options: Optional[RenderOptions] = None,
    context: Optional[Mapping[str, Any]] = None,
    stream: Optional[TextIO] = None,
) -> str:
    """Compile ``tree``, indent the result and write it to ``stream``.

    Lines are indented by element depth only; tag names, attribute values
    and text are written exactly as compiled.
    """

    options = (options or RenderOptions()).with_mode(xml)
    indented = indent(compile_tree(tree, options=options, context=context), xml=options.xml)
    (stream or sys.stdout).write(indented + "\n")
    return indented


render = compile_tree


__all__ = ["compile_tree", "preview", "render", "render_flat"]
