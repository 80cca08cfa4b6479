from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates

from clipnote.application.controller import ControllerState
from clipnote.services.rendering import render_markdown

TEMPLATES_DIR = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

BRAND_NAME = "ClipNote.ai"
GITHUB_URL = "https://github.com/himanshumahesh"


@dataclass(frozen=True)
class FeatureCard:
    icon: str
    title: str
    description: str


FEATURE_CARDS: tuple[FeatureCard, ...] = (
    FeatureCard(
        icon="📄",
        title="Summarize any article",
        description="Copy and paste a URL or text to generate a concise summary",
    ),
    FeatureCard(
        icon="🔑",
        title="Extract key points",
        description="Get the most important information from the article",
    ),
    FeatureCard(
        icon="📊",
        title="Structured output",
        description="Receive a well-organized summary with main ideas and conclusions",
    ),
    FeatureCard(
        icon="⏱️",
        title="Save time",
        description="Quickly grasp the essence of long articles",
    ),
)


class MenuState:
    """Open/closed state of the collapsible mobile menu."""

    def __init__(self) -> None:
        self.open = False

    def toggle(self) -> bool:
        self.open = not self.open
        return self.open


def page_context(state: ControllerState, menu: MenuState) -> dict[str, Any]:
    return {
        "brand": BRAND_NAME,
        "github_url": GITHUB_URL,
        "menu_open": menu.open,
        "input": state.input,
        "is_loading": state.is_loading,
        "submit_label": "Summarizing..." if state.is_loading else "Summarize",
        "has_result": state.has_result,
        "summary_html": render_markdown(state.summary),
        "features": FEATURE_CARDS,
    }
