"""Global pytest fixtures for blog chart rendering.

This module provides shared fixtures for testing including:
- Isolation of cached settings and the shared chart composer
- Small datasets for geometry and rendering tests
- HTTP clients for the API
"""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blogcharts.radial import composer as composer_module
from blogcharts.radial.base import DataRecord, Dataset
from blogcharts.radial.config import get_settings


# ===========================================
# STATE ISOLATION
# ===========================================


@pytest.fixture(autouse=True)
def reset_chart_state() -> Generator[None, None, None]:
    """Drop cached settings and the composer singleton around every test."""
    get_settings.cache_clear()
    composer_module._chart_composer = None
    yield
    get_settings.cache_clear()
    composer_module._chart_composer = None


# ===========================================
# DATASET FIXTURES
# ===========================================


@pytest.fixture
def three_record_dataset() -> Dataset:
    """Three records, already in alphabetical order."""
    return Dataset(
        records=(
            DataRecord(label="A", value=10, description="First category"),
            DataRecord(label="B", value=30, description="Second category"),
            DataRecord(label="C", value=20, description="Third category"),
        )
    )


@pytest.fixture
def zero_value_dataset() -> Dataset:
    """A dataset with one zero-valued record."""
    return Dataset(
        records=(
            DataRecord(label="Empty", value=0, description="Nothing here"),
            DataRecord(label="Full", value=40, description="Everything here"),
        )
    )


# ===========================================
# HTTP CLIENT FIXTURES
# ===========================================


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for API testing."""
    from blogcharts.main import create_app

    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
