from __future__ import annotations

import logging

import pytest

from clipnote.application.controller import SummarizeController
from clipnote.core.constants import SUMMARY_ERROR_MESSAGE
from clipnote.core.errors import EmptySummaryError, SummarizationNetworkError
from tests.conftest import FakeGateway


def test_initial_state_is_idle_and_empty():
    controller = SummarizeController(FakeGateway())

    state = controller.state()
    assert state.input == ""
    assert state.summary == ""
    assert state.is_loading is False
    assert state.has_result is False


@pytest.mark.parametrize("text", ["https://example.com/article", "", "plain pasted text"])
async def test_loading_flag_is_set_only_while_request_is_in_flight(text: str):
    seen: list[tuple[bool, str]] = []
    controller: SummarizeController

    async def gateway(prompt: str) -> str:
        seen.append((controller.is_loading, controller.summary))
        return "# Done"

    controller = SummarizeController(gateway)
    controller.summary = "# Previous summary"

    await controller.submit(text)

    # Stale result is cleared as soon as loading starts.
    assert seen == [(True, "")]
    assert controller.is_loading is False
    assert controller.input == text


async def test_success_stores_raw_text_unmodified():
    text = "# Title\n## Key Points\n- a\n- b\n- c\n## Main Ideas\n1. x\n\n## Conclusion\nDone.  \n"
    controller = SummarizeController(FakeGateway(text=text))

    result = await controller.submit("https://example.com/article")

    assert result == text
    assert controller.summary == text
    assert controller.has_result


async def test_gateway_failure_collapses_to_fixed_message(caplog):
    gateway = FakeGateway(error=SummarizationNetworkError("Failed to reach the Gemini API."))
    controller = SummarizeController(gateway)

    with caplog.at_level(logging.ERROR, logger="clipnote"):
        result = await controller.submit("https://example.com/article")

    assert result == "An error occurred while summarizing the article."
    assert controller.summary == SUMMARY_ERROR_MESSAGE
    assert controller.is_loading is False
    record = next(r for r in caplog.records if r.name == "clipnote.application.controller")
    assert record.failure == "network"


async def test_unexpected_exception_is_also_collapsed(caplog):
    controller = SummarizeController(FakeGateway(error=RuntimeError("boom")))

    with caplog.at_level(logging.ERROR, logger="clipnote"):
        result = await controller.submit("text")

    assert result == SUMMARY_ERROR_MESSAGE
    assert any("Unexpected error" in r.getMessage() for r in caplog.records)


async def test_empty_input_is_sent_as_is():
    gateway = FakeGateway()
    controller = SummarizeController(gateway)

    await controller.submit("")

    assert len(gateway.prompts) == 1
    assert gateway.prompts[0].startswith("Summarize the article at this URL: . ")


async def test_prompt_carries_url_and_required_sections():
    gateway = FakeGateway()
    controller = SummarizeController(gateway)

    await controller.submit("https://example.com/article")

    prompt = gateway.prompts[0]
    assert "https://example.com/article" in prompt
    assert "# {insert article name here}" in prompt
    for header in ("## Key Points", "## Main Ideas", "## Conclusion"):
        assert header in prompt


@pytest.mark.parametrize(
    "gateway_factory, expected_error",
    [
        (lambda: FakeGateway(text="# Ok"), False),
        (lambda: FakeGateway(error=EmptySummaryError("Empty summary response.")), True),
    ],
)
async def test_repeated_submits_classify_the_same(gateway_factory, expected_error: bool):
    controller = SummarizeController(gateway_factory())

    first = await controller.submit("https://example.com/article")
    second = await controller.submit("https://example.com/article")

    assert (first == SUMMARY_ERROR_MESSAGE) is expected_error
    assert (second == SUMMARY_ERROR_MESSAGE) is expected_error
