from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from clipnote.api.deps import get_pages
from clipnote.application.pages import PageRegistry, PageSession
from clipnote.core.logging import log_context
from clipnote.web.view import page_context, templates

router = APIRouter(tags=["pages"])


def _render(request: Request, page: PageSession) -> HTMLResponse:
    context = page_context(page.controller.state(), page.menu)
    context["page_id"] = page.page_id
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, pages: Annotated[PageRegistry, Depends(get_pages)]) -> HTMLResponse:
    # Every load starts Idle, like a browser reload.
    return _render(request, pages.open())


@router.post("/", response_class=HTMLResponse)
async def submit(
    request: Request,
    pages: Annotated[PageRegistry, Depends(get_pages)],
    url: Annotated[str, Form()] = "",
    page_id: Annotated[str, Form()] = "",
) -> HTMLResponse:
    page = pages.resume(page_id)
    with log_context(page_id=page.page_id):
        await page.controller.submit(url)
    return _render(request, page)


@router.post("/menu", response_class=HTMLResponse)
async def toggle_menu(
    request: Request,
    pages: Annotated[PageRegistry, Depends(get_pages)],
    page_id: Annotated[str, Form()] = "",
) -> HTMLResponse:
    page = pages.resume(page_id)
    page.menu.toggle()
    return _render(request, page)
