"""Per-page state: every page load gets its own controller and menu."""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field

from clipnote.application.controller import SummarizeController, SummaryGateway
from clipnote.core.errors import NotFoundError
from clipnote.web.view import MenuState

logger = logging.getLogger(__name__)


@dataclass
class PageSession:
    page_id: str
    controller: SummarizeController
    menu: MenuState = field(default_factory=MenuState)


class PageRegistry:
    """
    Open pages keyed by id, least recently used first.

    A page lives until it is evicted; reloading the page opens a new one, so
    state never survives a reload. Only ``max_pages`` pages are kept.
    """

    def __init__(self, gateway: SummaryGateway, max_pages: int) -> None:
        self._gateway = gateway
        self._max_pages = max(1, max_pages)
        self._pages: OrderedDict[str, PageSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._pages)

    def open(self) -> PageSession:
        page = PageSession(page_id=uuid.uuid4().hex, controller=SummarizeController(self._gateway))
        self._pages[page.page_id] = page
        self._evict()
        return page

    def get(self, page_id: str) -> PageSession:
        page = self._pages.get(page_id)
        if page is None:
            raise NotFoundError("Page not found.")
        self._pages.move_to_end(page_id)
        return page

    def resume(self, page_id: str | None) -> PageSession:
        """Return the page behind a form post, or a fresh one if it has expired."""
        if page_id and page_id in self._pages:
            return self.get(page_id)
        return self.open()

    def _evict(self) -> None:
        while len(self._pages) > self._max_pages:
            page_id, _ = self._pages.popitem(last=False)
            logger.debug("Evicted page", extra={"page_id": page_id})
