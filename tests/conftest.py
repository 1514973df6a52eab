"""Pytest configuration and fixtures."""
import os
import json
import pytest
from unittest.mock import MagicMock
from hypothesis import settings

import requests

# Hypothesis profiles
settings.register_profile("ci", max_examples=100)
settings.register_profile("dev", max_examples=10)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


SAMPLE_DOCUMENT = {
    "Status": 0,
    "TC": False,
    "RD": True,
    "RA": True,
    "AD": False,
    "CD": False,
    "Question": [{"name": "example.com.", "type": 1}],
    "Answer": [
        {"name": "example.com.", "type": 1, "TTL": 300, "data": "93.184.216.34"},
    ],
}


def make_http_response(status_code: int = 200, body=b"") -> MagicMock:
    """Build a stand-in for requests.Response."""
    if isinstance(body, dict):
        body = json.dumps(body).encode("utf-8")
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = body
    return response


@pytest.fixture
def make_response():
    """Factory for requests.Response stand-ins."""
    return make_http_response


@pytest.fixture
def sample_document():
    """A fresh copy of a well-formed DoH JSON document."""
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def stub_session():
    """A requests.Session stand-in returning the sample document."""
    session = MagicMock(spec=requests.Session)
    session.get.return_value = make_http_response(200, SAMPLE_DOCUMENT)
    return session


@pytest.fixture
def clean_env(monkeypatch):
    """Remove DoH environment variables for config tests."""
    for key in ("DOH_PROVIDER", "DOH_URL", "DOH_TIMEOUT", "DOH_TYPE", "DEBUG"):
        monkeypatch.delenv(key, raising=False)
