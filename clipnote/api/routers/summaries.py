from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from clipnote.api.deps import get_pages
from clipnote.application.pages import PageRegistry
from clipnote.application.summaries import page_snapshot, summarize_input
from clipnote.schemas.errors import ErrorResponse
from clipnote.schemas.summaries import PageStateResponse, SummarizeRequest, SummarizeResponse

router = APIRouter(prefix="/api/pages", tags=["summaries"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Unknown or expired page id."}}


@router.post("", response_model=PageStateResponse, status_code=201)
async def open_page(pages: Annotated[PageRegistry, Depends(get_pages)]) -> PageStateResponse:
    return page_snapshot(pages.open())


@router.get("/{page_id}", response_model=PageStateResponse, responses=_NOT_FOUND)
async def page_state(page_id: str, pages: Annotated[PageRegistry, Depends(get_pages)]) -> PageStateResponse:
    return page_snapshot(pages.get(page_id))


@router.post(
    "/{page_id}/summarize",
    response_model=SummarizeResponse,
    responses={
        **_NOT_FOUND,
        400: {"model": ErrorResponse, "description": "Malformed request body."},
        413: {"model": ErrorResponse, "description": "Request body too large."},
    },
)
async def summarize(
    page_id: str,
    request: SummarizeRequest,
    pages: Annotated[PageRegistry, Depends(get_pages)],
) -> SummarizeResponse:
    # Summarization failures come back as the fixed message, never as an HTTP error.
    return await summarize_input(request, pages.get(page_id))
