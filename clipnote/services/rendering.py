from __future__ import annotations

from markdown import markdown

MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]


def render_markdown(text: str) -> str:
    """Render summary markdown to HTML as-is (no sanitization)."""
    if not text:
        return ""
    return markdown(text, extensions=MARKDOWN_EXTENSIONS)
