"""
Shared HTTP client for upstream data sources.

Wraps a requests.Session so every call carries the engine User-Agent and
a per-call timeout, and so transport, status and decode errors surface
as a single ProviderUnavailable exception.
"""

import logging
import threading
from typing import Any, Dict, Optional

import requests

from sps_briefing.config import Settings
from sps_briefing.errors import ProviderUnavailable

logger = logging.getLogger(__name__)


class HttpClient:
    """Thin JSON/text client over a requests session."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.timeout = settings.provider_timeout
        self._session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        """The injected session, otherwise one session per calling thread."""
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            session.headers.update({
                "User-Agent": self.settings.user_agent,
            })
            self._local.session = session
        return session

    def _request(self, source: str, method: str, url: str, **kwargs) -> requests.Response:
        try:
            if method == "POST":
                response = self.session.post(url, timeout=self.timeout, **kwargs)
            else:
                response = self.session.get(url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise ProviderUnavailable(source, f"timed out after {self.timeout}s")
        except requests.exceptions.RequestException as e:
            raise ProviderUnavailable(source, f"request failed: {e}")
        return response

    def get_json(self, source: str, url: str, params: Optional[Dict[str, Any]] = None,
                 headers: Optional[Dict[str, str]] = None) -> Any:
        response = self._request(source, "GET", url, params=params, headers=headers)
        try:
            return response.json()
        except ValueError as e:
            raise ProviderUnavailable(source, f"invalid JSON: {e}")

    def post_json(self, source: str, url: str, body: Dict[str, Any],
                  headers: Optional[Dict[str, str]] = None) -> Any:
        response = self._request(source, "POST", url, json=body, headers=headers)
        try:
            return response.json()
        except ValueError as e:
            raise ProviderUnavailable(source, f"invalid JSON: {e}")

    def get_text(self, source: str, url: str, params: Optional[Dict[str, Any]] = None) -> str:
        response = self._request(source, "GET", url, params=params)
        return response.text
