"""Element rendering into a scratch buffer."""

from __future__ import annotations

import io
from typing import Any, List, Optional, Sequence, TextIO

from .attributes import format_attributes, merge_classes, parse_attributes
from .config import RenderOptions
from .errors import InvalidTagError, VoidElementError
from .evaluator import Evaluator
from .nodes import Element, Nested, Value
from .normalize import to_item
from .tags import is_void_tag


class Renderer:
    """Write elements as markup into ``out``.

    With ``pretty`` set, line breaks follow the shape of the tree: an element
    that contains elements gets its opening tag, every text run, every child
    and its closing tag on separate lines, while a leaf element stays on one
    line. Without it the markup is written flat.
    """

    def __init__(
        self,
        out: TextIO,
        options: RenderOptions,
        evaluator: Optional[Evaluator] = None,
        *,
        pretty: bool = False,
    ) -> None:
        self.out = out
        self.options = options
        self.evaluator = evaluator or Evaluator()
        self.pretty = pretty

    def _newline(self) -> None:
        if self.pretty:
            self.out.write("\n")

    def _write_run(self, run: List[str]) -> None:
        text = "".join(run).strip("\n")
        if text:
            self.out.write(text)
            self.out.write("\n")

    def check_tag(self, tag: str) -> None:
        if tag not in self.options.allowed_tags:
            raise InvalidTagError(tag)

    def render(self, element: Element, *, root: bool = False) -> None:
        """Render ``element`` with its shorthand attributes and children."""

        self.check_tag(element.tag)
        resolve = self.evaluator.resolve
        consumed, attributes = parse_attributes(element.args, resolve)
        children = [resolve(item) for item in element.args[consumed:]]
        self.write_element(element.tag, attributes, children, root=root)

    def write_element(
        self,
        tag: str,
        attributes: Sequence[Any],
        children: Sequence[Value],
        *,
        root: bool = False,
    ) -> None:
        attrs = format_attributes(merge_classes(attributes))
        write = self.out.write

        if not self.options.xml:
            if is_void_tag(tag):
                if children:
                    raise VoidElementError(tag)
                write(f"<{tag}{attrs}/>")
                self._newline()
                return
            if root and tag == "html":
                write(self.options.doctype_line)
                self._newline()
        elif not children:
            write(f"<{tag}{attrs}/>")
            self._newline()
            return

        write(f"<{tag}{attrs}>")
        if self.pretty and any(isinstance(child, Nested) for child in children):
            write("\n")
            run: List[str] = []
            for child in children:
                if isinstance(child, Nested):
                    self._write_run(run)
                    run = []
                    self.render(child.value)
                else:
                    run.append(child.text)
            self._write_run(run)
        else:
            for child in children:
                if isinstance(child, Nested):
                    self.render(child.value)
                else:
                    write(child.text)
        write(f"</{tag}>")
        self._newline()


def render_element(
    tag: str,
    attributes: Sequence[Any] = (),
    children: Sequence[Any] = (),
    options: Optional[RenderOptions] = None,
    *,
    context: Optional[dict] = None,
) -> str:
    """Render one element from an attribute list and raw children, flat.

    ``attributes`` holds ``(key, value)`` pairs or a flat
    ``[key, value, ...]`` list; ``children`` holds raw tree items.
    """

    options = options or RenderOptions()
    with io.StringIO() as buffer:
        renderer = Renderer(buffer, options, Evaluator(context))
        renderer.check_tag(tag)
        values = [renderer.evaluator.resolve(to_item(child)) for child in children]
        renderer.write_element(tag, attributes, values)
        return buffer.getvalue()


__all__ = ["Renderer", "render_element"]
