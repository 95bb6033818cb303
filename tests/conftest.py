"""Shared fixtures: a recording transport in place of the network."""
from typing import List, Optional

import pytest
import requests
from requests.adapters import BaseAdapter

from restvpn_cli.config import ADDR_VAR, DEBUG_VAR, KEY_VAR


class RecordingAdapter(BaseAdapter):
    """Transport adapter that records prepared requests and answers with a canned body."""

    def __init__(self):
        super().__init__()
        self.requests: List[requests.PreparedRequest] = []
        self.body = b'{"status": "ok"}'
        self.status_code = 200
        self.error: Optional[Exception] = None

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        if self.error is not None:
            raise self.error

        response = requests.Response()
        response.status_code = self.status_code
        response._content = self.body
        response._content_consumed = True
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass

    @property
    def last(self) -> requests.PreparedRequest:
        assert len(self.requests) == 1, f"expected one request, got {len(self.requests)}"
        return self.requests[0]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep the developer's RESTVPN_* variables and .env files out of the tests."""
    for name in (ADDR_VAR, KEY_VAR, DEBUG_VAR):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def transport(monkeypatch: pytest.MonkeyPatch) -> RecordingAdapter:
    """Route every requests.Session through one RecordingAdapter."""
    adapter = RecordingAdapter()
    monkeypatch.setattr(requests.Session, "get_adapter", lambda self, url: adapter)
    return adapter
