"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from tests.fakes.fake_data_source import GatedDataSource


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "infinite_scroll.yml"


@pytest.fixture
def gated_source() -> GatedDataSource:
    return GatedDataSource()


@pytest.fixture
def by_id():
    def key(item, index):
        return item["id"]

    return key
