"""Shared fixtures: fetchers backed by canned upstream responses."""

import json

import httpx
import pytest

from config.settings import ApiConfig, LoggingConfig, ScraperConfig
from lvtracker.extractors.fetcher import Fetcher

API = ApiConfig(api_host="api.example.test", locale="eng-ca")


class FakeUpstream:
    """Maps URLs to canned responses and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, url, body="", status=200):
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        self.routes[url] = (status, body)

    def fail(self, url):
        self.routes[url] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url not in self.routes:
            return httpx.Response(404, text="not found")
        route = self.routes[url]
        if route is None:
            raise httpx.ConnectError("connection refused", request=request)
        status, body = route
        return httpx.Response(status, text=body)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def fetcher(upstream):
    client = httpx.Client(transport=httpx.MockTransport(upstream.handler))
    fetcher = Fetcher(
        ScraperConfig(base_url="https://shop.example.test"),
        LoggingConfig(log_visits=False, log_errors=False),
        client=client,
    )
    yield fetcher
    client.close()


@pytest.fixture
def api_config():
    return API
