from __future__ import annotations

from fastapi import Request

from clipnote.application.pages import PageRegistry
from clipnote.core.config import Settings


def get_pages(request: Request) -> PageRegistry:
    return request.app.state.pages


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
