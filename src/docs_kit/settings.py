# src/docs_kit/settings.py

"""YAML settings file for the parser and renderer.

Example::

    parser:
      reconcile: provenance
    render:
      default_language: tsx
      unstyled: true
"""

import logging
from dataclasses import fields, replace
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel

from docs_kit.parsers.config import ParserConfig
from docs_kit.rendering.config import HtmlTheme, RenderConfig

logger = logging.getLogger(__name__)


class ParserSettings(BaseModel):
    reconcile: Literal["content", "provenance"] = "content"

    class Config:
        extra = "forbid"


class RenderSettings(BaseModel):
    default_language: str = "typescript"
    unstyled: bool = False
    strip_audio_guides: bool = True
    theme: dict[str, str] = {}  # per-element class overrides

    class Config:
        extra = "forbid"


class Settings(BaseModel):
    parser: ParserSettings = ParserSettings()
    render: RenderSettings = RenderSettings()

    class Config:
        extra = "forbid"

    def parser_config(self) -> ParserConfig:
        return ParserConfig(reconcile=self.parser.reconcile)

    def render_config(self) -> RenderConfig:
        theme = HtmlTheme.unstyled() if self.render.unstyled else HtmlTheme()
        unknown = set(self.render.theme) - {f.name for f in fields(HtmlTheme)}
        if unknown:
            raise ValueError(f"Unknown theme elements: {sorted(unknown)}")
        theme = replace(theme, **self.render.theme)
        return RenderConfig(
            default_language=self.render.default_language,
            theme=theme,
            strip_audio_guides=self.render.strip_audio_guides,
        )


def load_settings(path: str | Path) -> Settings:
    logger.info("Loading settings from: %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    settings = Settings(**data)
    logger.debug("Loaded settings: %s", settings)
    return settings
