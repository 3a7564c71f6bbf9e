"""Pytest fixtures for FLUX client tests."""

from typing import Callable

import httpx
import pytest

from bfl_flux.client import FluxClient


@pytest.fixture
def sample_result_data() -> dict:
    """Sample get_result payload for a finished task."""
    return {
        "id": "task-123",
        "status": "Ready",
        "result": {"sample": "https://example.com/image.jpg", "prompt": "A cat"},
        "progress": 100,
        "details": {"seed": 42},
        "preview": None,
    }


@pytest.fixture
def make_client() -> Callable[..., FluxClient]:
    """Build a FluxClient whose requests are answered by a handler function."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], api_key: str = "test-key") -> FluxClient:
        return FluxClient(api_key, options={"transport": httpx.MockTransport(handler)})

    return _make
