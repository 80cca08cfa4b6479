from __future__ import annotations

import asyncio

import pytest

from clipnote.application.pages import PageRegistry
from clipnote.core.errors import NotFoundError
from tests.conftest import FakeGateway


def test_open_pages_start_idle_and_independent():
    registry = PageRegistry(FakeGateway(), max_pages=10)

    first = registry.open()
    second = registry.open()

    assert first.page_id != second.page_id
    assert first.controller is not second.controller
    assert first.menu is not second.menu
    assert first.controller.state().summary == ""
    assert first.menu.open is False


def test_get_unknown_page_raises_not_found():
    registry = PageRegistry(FakeGateway(), max_pages=10)

    with pytest.raises(NotFoundError):
        registry.get("missing")


def test_resume_falls_back_to_a_new_page():
    registry = PageRegistry(FakeGateway(), max_pages=10)
    page = registry.open()

    assert registry.resume(page.page_id) is page
    assert registry.resume("expired").page_id != page.page_id
    assert registry.resume(None).page_id != page.page_id


def test_least_recently_used_page_is_evicted():
    registry = PageRegistry(FakeGateway(), max_pages=2)
    oldest = registry.open()
    recent = registry.open()
    registry.get(oldest.page_id)

    registry.open()

    assert len(registry) == 2
    assert registry.get(oldest.page_id) is oldest
    with pytest.raises(NotFoundError):
        registry.get(recent.page_id)


async def test_loading_flags_are_per_page():
    release = {"a": asyncio.Event(), "b": asyncio.Event()}

    async def gateway(prompt: str) -> str:
        key = "a" if "page-a" in prompt else "b"
        await release[key].wait()
        return f"# {key}"

    registry = PageRegistry(gateway, max_pages=10)
    page_a = registry.open()
    page_b = registry.open()

    task_a = asyncio.create_task(page_a.controller.submit("page-a"))
    task_b = asyncio.create_task(page_b.controller.submit("page-b"))
    await asyncio.sleep(0)
    release["a"].set()
    await task_a

    assert page_a.controller.is_loading is False
    assert page_a.controller.summary == "# a"
    assert page_b.controller.is_loading is True
    assert page_b.controller.summary == ""

    release["b"].set()
    await task_b
    assert page_b.controller.is_loading is False
    assert page_b.controller.summary == "# b"
