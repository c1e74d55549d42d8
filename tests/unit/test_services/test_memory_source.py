"""Tests for InMemoryDataSource."""

import asyncio

import pytest


def test_memory_source_pages():
    from infinite_scroll.services.memory_source import InMemoryDataSource

    source = InMemoryDataSource(range(25), page_size=10)

    first = asyncio.run(source(0))
    last = asyncio.run(source(20))

    assert first == {"items": list(range(10)), "total": 25, "offset": 0}
    assert last["items"] == [20, 21, 22, 23, 24]
    assert source.requested_offsets == [0, 20]


def test_memory_source_past_the_end():
    from infinite_scroll.services.memory_source import InMemoryDataSource

    source = InMemoryDataSource([1, 2], page_size=10)

    assert source.get_page(5) == {"items": [], "total": 2, "offset": 5}
    assert source.get_total_count() == 2


def test_memory_source_failure_injection():
    from infinite_scroll.services.memory_source import InMemoryDataSource

    source = InMemoryDataSource([1, 2, 3], page_size=2)
    source.fail_next(1, message="offline")

    with pytest.raises(ConnectionError, match="offline"):
        asyncio.run(source(0))

    assert asyncio.run(source(0))["items"] == [1, 2]


def test_memory_source_reflects_record_changes():
    from infinite_scroll.services.memory_source import InMemoryDataSource

    source = InMemoryDataSource([1], page_size=5)
    source.records.append(2)

    assert asyncio.run(source(0))["total"] == 2
