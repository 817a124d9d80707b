"""Shared fixtures for the gitz test suite."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from gitz.config import Credentials

BASE = "http://api.example.test/api/v2/json/issues"


def make_response(payload=None, status=200, text=None, url=BASE):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    body = text if text is not None else json.dumps(payload)
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def credentials():
    return Credentials(username="alice", api_token="secret")


@pytest.fixture
def session():
    """A stand-in for requests.Session that answers every call with {}."""
    s = MagicMock(spec=requests.Session)
    s.get.return_value = make_response({})
    s.post.return_value = make_response({})
    return s
