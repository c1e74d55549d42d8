"""Tests for dependency injection container."""

import asyncio


def test_container_create_with_defaults():
    from infinite_scroll.core.di_container import ScrollContainer
    from infinite_scroll.services import InMemoryDataSource

    container = ScrollContainer.create(InMemoryDataSource())

    assert container.settings is not None
    assert container._handle is None


def test_container_handle_uses_settings():
    from infinite_scroll.config import AppSettings, ScrollSettings, TriggerSettings
    from infinite_scroll.core.di_container import ScrollContainer
    from infinite_scroll.services import InMemoryDataSource

    settings = AppSettings(
        scroll=ScrollSettings(reverse=True, discard_stale_responses=True),
        trigger=TriggerSettings(),
    )
    container = ScrollContainer.create(InMemoryDataSource([1, 2]), settings=settings)

    async def scenario():
        handle = container.handle
        await handle.wait_idle()
        return handle

    handle = asyncio.run(scenario())

    assert handle.reverse is True
    assert handle.loader.discard_stale_responses is True
    assert handle.get_items() == (1, 2)


def test_container_handle_singleton():
    from infinite_scroll.core.di_container import ScrollContainer
    from infinite_scroll.services import InMemoryDataSource

    container = ScrollContainer.create(InMemoryDataSource())

    async def scenario():
        first = container.handle
        second = container.handle
        await first.wait_idle()
        return first, second

    first, second = asyncio.run(scenario())

    assert first is second


def test_container_dispose():
    from infinite_scroll.core.di_container import ScrollContainer
    from infinite_scroll.services import InMemoryDataSource

    container = ScrollContainer.create(InMemoryDataSource())
    container.dispose()

    async def scenario():
        handle = container.handle
        await handle.wait_idle()
        container.dispose()
        return handle

    assert asyncio.run(scenario()).disposed is True
