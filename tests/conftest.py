"""
Pytest configuration for AutoFoundr tests.

Provides seeded generators, a TestClient for the generation service, and a
requests-compatible session that routes proxy traffic into that TestClient
so proxy tests never touch the network.
"""

import random
from urllib.parse import urlsplit

import pytest
import requests
from fastapi.testclient import TestClient

from autofoundr.config import Settings
from autofoundr.generator import ContentGenerator
from autofoundr.main import create_app
from autofoundr.proxy import create_proxy_app


class ASGISession:
    """Minimal stand-in for requests.Session that answers from a TestClient."""

    def __init__(self, client: TestClient):
        self.client = client
        self.calls = []

    def post(self, url, data=None, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "data": data, "json": json, "timeout": timeout})
        r = self.client.post(urlsplit(url).path, content=data, json=json, headers=headers)
        resp = requests.Response()
        resp.status_code = r.status_code
        resp._content = r.content
        resp.headers.update(r.headers)
        resp.url = url
        resp.reason = r.reason_phrase
        return resp


@pytest.fixture
def seeded_generator():
    return ContentGenerator(rng=random.Random(1234))


@pytest.fixture
def service_client(seeded_generator):
    return TestClient(create_app(seeded_generator))


@pytest.fixture
def backend_session(service_client):
    return ASGISession(service_client)


@pytest.fixture
def proxy_settings():
    return Settings(backend_url="http://backend.test/generate", request_timeout=5.0)


@pytest.fixture
def proxy_client(proxy_settings, backend_session):
    """Proxy wired to the in-process generation service."""
    return TestClient(create_proxy_app(proxy_settings, session=backend_session))
