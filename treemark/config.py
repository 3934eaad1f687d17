"""Render options and loading them from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .tags import DEFAULT_EXTENSION_TAGS, HTML5_TAGS

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'


class RenderOptions(BaseModel):
    """Options for a single compile call."""

    xml: bool = Field(
        False, description="Render XML instead of HTML (paired tags, XML header)."
    )
    doctype: Tuple[str, ...] = Field(
        ("html",),
        alias="doctypeParams",
        description="Words written after DOCTYPE when the root element is html.",
    )
    extension_tags: FrozenSet[str] = Field(
        DEFAULT_EXTENSION_TAGS,
        alias="extensionTags",
        description="Tags allowed in addition to the HTML5 set.",
    )
    xml_header: str = Field(
        XML_HEADER,
        alias="xmlHeader",
        description="Declaration line written before XML output.",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("extension_tags")
    @classmethod
    def _include_default_extensions(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(value) | DEFAULT_EXTENSION_TAGS

    @property
    def allowed_tags(self) -> FrozenSet[str]:
        return HTML5_TAGS | self.extension_tags

    @property
    def doctype_line(self) -> str:
        return "<!DOCTYPE " + " ".join(self.doctype) + ">"

    def with_mode(self, xml: bool | None) -> "RenderOptions":
        """Return options with ``xml`` overridden unless it is None."""

        if xml is None or xml == self.xml:
            return self
        return self.model_copy(update={"xml": xml})


def load_options(path: Path) -> RenderOptions:
    """Load render options from a YAML file; an empty file gives defaults."""

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read options from {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of render options.")
    try:
        return RenderOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid render options in {path}: {exc}") from exc


__all__ = ["RenderOptions", "XML_HEADER", "load_options"]
