from __future__ import annotations

from typing import Any

from openai import APIConnectionError, APIError, AsyncOpenAI

from clipnote.core.constants import SUMMARY_PROMPT_TEMPLATE
from clipnote.core.errors import EmptySummaryError, SummarizationApiError, SummarizationNetworkError


def build_prompt(text: str) -> str:
    """Interpolate user input (URL or raw text) into the summary prompt."""
    return SUMMARY_PROMPT_TEMPLATE.format(input=text)


async def generate_summary(prompt: str, *, api_key: str, model: str, base_url: str) -> str:
    """
    Send ``prompt`` to Gemini's OpenAI-compatible endpoint and return the raw text.

    The key is not checked here; an empty key is rejected by the API and
    surfaces as ``SummarizationApiError``. Requests are never retried.
    """
    async with AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0) as client:
        try:
            response = await client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIConnectionError as exc:
            raise SummarizationNetworkError("Failed to reach the Gemini API.") from exc
        except APIError as exc:
            raise SummarizationApiError("Gemini API rejected the request.") from exc

    content: Any = response.choices[0].message.content if response.choices else None
    if not isinstance(content, str) or not content.strip():
        raise EmptySummaryError("Empty summary response.")

    return content
