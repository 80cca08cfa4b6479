from __future__ import annotations

from clipnote.application.pages import PageSession
from clipnote.core.constants import SUMMARY_ERROR_MESSAGE
from clipnote.core.logging import log_context
from clipnote.schemas.summaries import PageStateResponse, SummarizeRequest, SummarizeResponse
from clipnote.services.rendering import render_markdown


async def summarize_input(request: SummarizeRequest, page: PageSession) -> SummarizeResponse:
    with log_context(page_id=page.page_id):
        summary = await page.controller.submit(request.input)
    return SummarizeResponse(
        page_id=page.page_id,
        summary=summary,
        html=render_markdown(summary),
        is_error=summary == SUMMARY_ERROR_MESSAGE,
    )


def page_snapshot(page: PageSession) -> PageStateResponse:
    state = page.controller.state()
    return PageStateResponse(
        page_id=page.page_id,
        input=state.input,
        summary=state.summary,
        is_loading=state.is_loading,
    )
