"""Resolution of embedded ``{{ expression }}`` items to values."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from jinja2 import Environment, StrictUndefined, TemplateError, Undefined

from .errors import EvaluationError, TreeFormatError
from .nodes import Expr, Item, Value
from .normalize import to_value


def expression_env() -> Environment:
    """Create the Jinja environment used to compile expressions."""

    return Environment(undefined=StrictUndefined, autoescape=False)


class Evaluator:
    """Resolve items against a context mapping.

    Expressions use Jinja syntax (``user.name | upper``, ``items[0]``,
    ``n * 2``). Undefined names are errors rather than empty strings.
    """

    def __init__(
        self,
        context: Optional[Mapping[str, Any]] = None,
        env: Optional[Environment] = None,
    ) -> None:
        self.context: Dict[str, Any] = dict(context or {})
        self.env = env or expression_env()
        self._compiled: Dict[str, Callable[..., Any]] = {}
        self._values: Dict[str, Value] = {}

    def _compile(self, source: str) -> Callable[..., Any]:
        compiled = self._compiled.get(source)
        if compiled is None:
            try:
                compiled = self.env.compile_expression(source, undefined_to_none=False)
            except TemplateError as exc:
                raise EvaluationError(source, str(exc)) from exc
            self._compiled[source] = compiled
        return compiled

    def evaluate(self, source: str) -> Any:
        compiled = self._compile(source)
        try:
            result = compiled(**self.context)
        except TemplateError as exc:
            raise EvaluationError(source, str(exc)) from exc
        except Exception as exc:
            raise EvaluationError(source, f"{type(exc).__name__}: {exc}") from exc
        if isinstance(result, Undefined):
            # StrictUndefined only raises when used, so a bare name gets here
            raise EvaluationError(source, f"{result._undefined_name!r} is undefined")
        return result

    def resolve(self, item: Item) -> Value:
        if not isinstance(item, Expr):
            return item
        value = self._values.get(item.source)
        if value is None:
            result = self.evaluate(item.source)
            try:
                value = to_value(result)
            except TreeFormatError as exc:
                raise EvaluationError(item.source, str(exc)) from exc
            self._values[item.source] = value
        return value


__all__ = ["Evaluator", "expression_env"]
