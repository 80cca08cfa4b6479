"""Summarize controller: the one stateful piece behind the page."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import partial

from clipnote.core.config import Settings
from clipnote.core.constants import SUMMARY_ERROR_MESSAGE
from clipnote.core.errors import SummarizationError
from clipnote.core.logging import log_context
from clipnote.services.summarizer import build_prompt, generate_summary

logger = logging.getLogger(__name__)

# Sends a prompt to the generative API and returns its text.
SummaryGateway = Callable[[str], Awaitable[str]]


@dataclass(frozen=True)
class ControllerState:
    input: str
    summary: str
    is_loading: bool

    @property
    def has_result(self) -> bool:
        return bool(self.summary)


def gemini_gateway(settings: Settings) -> SummaryGateway:
    return partial(
        generate_summary,
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
    )


class SummarizeController:
    """
    Owns the input text, the loading flag and the summary result.

    ``summary`` is either the API's markdown, the fixed error message, or ""
    when nothing has been submitted yet. Overlapping submits are not rejected:
    each one runs to completion and the last to finish wins.
    """

    def __init__(self, gateway: SummaryGateway) -> None:
        self._gateway = gateway
        self.input = ""
        self.summary = ""
        self.is_loading = False

    @property
    def has_result(self) -> bool:
        return bool(self.summary)

    def state(self) -> ControllerState:
        return ControllerState(input=self.input, summary=self.summary, is_loading=self.is_loading)

    async def submit(self, text: str) -> str:
        self.input = text
        self.is_loading = True
        self.summary = ""
        prompt = build_prompt(text)
        try:
            with log_context(input_chars=len(text)):
                try:
                    result = await self._gateway(prompt)
                except SummarizationError as exc:
                    logger.error(
                        "Error calling Gemini API: %s",
                        exc.detail,
                        exc_info=exc,
                        extra={"failure": exc.kind.value, "error_type": type(exc).__name__},
                    )
                    result = SUMMARY_ERROR_MESSAGE
                except Exception:
                    logger.exception("Unexpected error while summarizing")
                    result = SUMMARY_ERROR_MESSAGE
                else:
                    logger.info("Summary generated", extra={"summary_chars": len(result)})
            self.summary = result
        finally:
            self.is_loading = False
        return self.summary
