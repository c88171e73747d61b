"""Explicit UI state passed between Gradio callbacks."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from config.settings import SUPPORTED_LANGUAGES, SUPPORTED_THEMES, AppConfig


class Tab(str, Enum):
    """The four converter tabs."""

    TEXT_ENCODE = "text-encode"
    TEXT_DECODE = "text-decode"
    IMAGE_ENCODE = "image-encode"
    IMAGE_DECODE = "image-decode"


@dataclass(frozen=True, slots=True)
class UIState:
    """Per-session view state; stored in ``gr.State``."""

    active_tab: Tab = Tab.TEXT_ENCODE
    theme: str = "light"
    language: str = "en"

    @classmethod
    def from_config(cls, config: AppConfig) -> "UIState":
        return cls(theme=config.theme, language=config.language)

    def with_tab(self, tab: Tab | str) -> "UIState":
        return replace(self, active_tab=Tab(tab))

    def with_language(self, language: str) -> "UIState":
        if language not in SUPPORTED_LANGUAGES:
            return self
        return replace(self, language=language)

    def toggled_theme(self) -> "UIState":
        light, dark = SUPPORTED_THEMES
        return replace(self, theme=light if self.theme == dark else dark)
