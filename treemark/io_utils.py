"""Utility helpers for reading inputs and writing outputs."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .reader import load_tree, read

PathLike = Union[str, Path]


def read_tree(source: str) -> Any:
    """Load a raw tree from a file path, or s-expression text on stdin for ``-``."""

    if source == "-":
        return read(sys.stdin.read())
    return load_tree(Path(source))


def read_markup(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def load_context(path: Path) -> Dict[str, Any]:
    """Read expression context from a JSON or YAML mapping."""

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of names to values.")
    return data


def write_output(path: Optional[PathLike], text: str) -> None:
    """Write text to ``path`` (creating parent directories) or to stdout."""

    if path is None:
        sys.stdout.write(text + "\n")
        return
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(text + "\n", encoding="utf-8")


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["load_context", "read_markup", "read_tree", "warn", "write_output"]
