"""Exceptions raised while compiling trees to markup."""

from __future__ import annotations


class TreemarkError(Exception):
    """Base class for every error raised by treemark."""


class InvalidTagError(TreemarkError, ValueError):
    """Tag is neither a standard HTML5 tag nor an allow-listed extension."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"invalid tag: {tag!r}")
        self.tag = tag


class EvaluationError(TreemarkError):
    """An embedded expression could not be resolved to a value."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"cannot evaluate {{{{ {source} }}}}: {message}")
        self.source = source


class MalformedAttributeListError(TreemarkError, ValueError):
    """Flat attribute list with a key that has no value slot."""


class VoidElementError(TreemarkError, ValueError):
    """Children were given to an element that is always empty."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"<{tag}> is an empty element and cannot have children")
        self.tag = tag


class TreeFormatError(TreemarkError, ValueError):
    """Input tree literal does not have the shape of an element."""


class ReadError(TreemarkError, ValueError):
    """Syntax error in s-expression source text."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line


class ConfigError(TreemarkError):
    """Render options file is unreadable or invalid."""


__all__ = [
    "ConfigError",
    "EvaluationError",
    "InvalidTagError",
    "MalformedAttributeListError",
    "ReadError",
    "TreeFormatError",
    "TreemarkError",
    "VoidElementError",
]
