from __future__ import annotations

from pydantic import BaseModel


class SummarizeRequest(BaseModel):
    input: str


class SummarizeResponse(BaseModel):
    page_id: str
    summary: str
    html: str
    is_error: bool


class PageStateResponse(BaseModel):
    page_id: str
    input: str
    summary: str
    is_loading: bool
