"""
Shared test doubles.

FakeSession stands in for requests.Session: responses are registered per
URL, either as a fixed FakeResponse, a list consumed in order, an
exception to raise, or a callable receiving the call record.
"""

import requests

from sps_briefing.config import Settings
from sps_briefing.services.http_client import HttpClient

INVALID_JSON = object()


class FakeResponse:
    def __init__(self, payload=None, text="", status_code=200):
        self.payload = payload
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.payload is INVALID_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeCall:
    def __init__(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.method = method
        self.url = url
        self.params = params or {}
        self.json = json or {}
        self.headers = headers or {}
        self.timeout = timeout


class FakeSession:
    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def _respond(self, call):
        self.calls.append(call)
        if call.url not in self.routes:
            raise requests.exceptions.ConnectionError(f"no route for {call.url}")
        handler = self.routes[call.url]
        if isinstance(handler, list):
            handler = handler.pop(0)
        if callable(handler) and not isinstance(handler, FakeResponse):
            handler = handler(call)
        if isinstance(handler, Exception):
            raise handler
        return handler

    def get(self, url, timeout=None, params=None, headers=None):
        return self._respond(FakeCall("GET", url, params=params, headers=headers, timeout=timeout))

    def post(self, url, timeout=None, json=None, headers=None):
        return self._respond(FakeCall("POST", url, json=json, headers=headers, timeout=timeout))

    def calls_to(self, url):
        return [c for c in self.calls if c.url == url]


def make_client(routes=None, **settings_overrides):
    """Settings, FakeSession and an HttpClient wired to it."""
    settings = Settings(**settings_overrides)
    session = FakeSession(routes)
    return settings, session, HttpClient(settings, session=session)


def place(name, lat, lng, address="", **extra):
    """A Places (New) result entry."""
    entry = {
        "displayName": {"text": name},
        "formattedAddress": address,
        "location": {"latitude": lat, "longitude": lng},
    }
    entry.update(extra)
    return entry
