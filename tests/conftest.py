"""Pytest configuration and shared fixtures."""

from typing import Generator

import pytest

from core.settings import PipelineSettings, get_app_settings
from orchestration import HandlerCreators, create_handlers
from tests.mocks.in_memory_service import AsyncInMemoryService, InMemoryService


ITEMS = [
    {"id": 5, "name": "x", "owner": "alice"},
    {"id": 6, "name": "z", "owner": "bob"},
    {"id": 7, "name": "w", "owner": "alice"},
]


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Settings are cached per process; reset around every test."""
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


@pytest.fixture
def service() -> InMemoryService:
    return InMemoryService(items=ITEMS)


@pytest.fixture
def async_service() -> AsyncInMemoryService:
    return AsyncInMemoryService(items=ITEMS)


@pytest.fixture
def handlers(service: InMemoryService) -> HandlerCreators:
    return create_handlers(service, PipelineSettings(trace_steps=False))


@pytest.fixture
def async_handlers(async_service: AsyncInMemoryService) -> HandlerCreators:
    return create_handlers(async_service, PipelineSettings(trace_steps=False))
