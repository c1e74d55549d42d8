"""Tests for the data source boundary."""

import asyncio
from types import SimpleNamespace

import pytest


def test_page_from_mapping():
    from infinite_scroll.services.data_source import Page

    page = Page.from_response({"items": (1, 2), "total": 10, "offset": 0})

    assert page.items == [1, 2]
    assert page.total == 10
    assert page.offset == 0


def test_page_from_object():
    from infinite_scroll.services.data_source import Page

    page = Page.from_response(SimpleNamespace(items=[1], total=3, offset=5))

    assert page.items == [1]
    assert page.total == 3
    assert page.offset == 5


def test_page_missing_offset_uses_requested_offset():
    from infinite_scroll.services.data_source import Page

    page = Page.from_response({"items": [], "total": 0}, requested_offset=20)

    assert page.offset == 20


def test_page_accepts_integral_float_total():
    from infinite_scroll.services.data_source import Page

    page = Page.from_response({"items": [], "total": 100.0}, requested_offset=0)

    assert page.total == 100
    assert type(page.total) is int


@pytest.mark.parametrize(
    "response",
    [
        None,
        [1, 2, 3],
        {"items": "abc", "total": 3},
        {"items": 5, "total": 3},
        {"items": [], "total": "10"},
        {"items": [], "total": True},
        {"items": [], "total": 10.5},
        {"items": [], "total": float("nan")},
    ],
)
def test_page_rejects_malformed_responses(response):
    from infinite_scroll.exceptions import DataSourceFailure
    from infinite_scroll.services.data_source import Page

    with pytest.raises(DataSourceFailure):
        Page.from_response(response, requested_offset=7)


def test_service_accepts_sync_function():
    from infinite_scroll.services.data_source import DataSourceService

    offsets = []

    def load_items(offset):
        offsets.append(offset)
        return {"items": [offset], "total": 1}

    page = asyncio.run(DataSourceService(load_items).fetch(4))

    assert page.items == [4]
    assert offsets == [4]


def test_service_accepts_coroutine_function():
    from infinite_scroll.services.data_source import DataSourceService

    async def load_items(offset):
        await asyncio.sleep(0)
        return {"items": ["a", "b"], "total": 2, "offset": offset}

    page = asyncio.run(DataSourceService(load_items).fetch(0))

    assert page.items == ["a", "b"]


def test_service_wraps_any_failure():
    from infinite_scroll.exceptions import DataSourceFailure
    from infinite_scroll.services.data_source import DataSourceService

    async def load_items(offset):
        raise ConnectionRefusedError("down")

    with pytest.raises(DataSourceFailure) as excinfo:
        asyncio.run(DataSourceService(load_items).fetch(30))

    assert excinfo.value.offset == 30
    assert isinstance(excinfo.value.__cause__, ConnectionRefusedError)


def test_service_requires_callable():
    from infinite_scroll.exceptions import ConfigurationError
    from infinite_scroll.services.data_source import DataSourceService

    with pytest.raises(ConfigurationError):
        DataSourceService("https://example.invalid/items")
