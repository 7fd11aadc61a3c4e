"""Pytest fixtures for product catalogue client tests."""

import httpx
import pytest

from src.product_api import ProductApi


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays queued outcomes."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if self.outcomes else httpx.Response(200, json={})
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def default_settings():
    return {
        "debug": True,
        "host": "api.backcountry.com",
        "preview": False,
        "site": "bcs",
    }


@pytest.fixture
def product_api(default_settings):
    return ProductApi(default_settings)


@pytest.fixture
def make_api(default_settings):
    """Build a ProductApi wired to a RecordingHandler; returns (api, handler)."""

    def _make(*outcomes, **overrides):
        handler = RecordingHandler(*outcomes)
        settings = {**default_settings, **overrides}
        return ProductApi(settings, http_transport=httpx.MockTransport(handler)), handler

    return _make
