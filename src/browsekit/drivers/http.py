"""HTTP driver — headless, no JavaScript, backed by ``httpx``.

The application handle decides where requests go:

- a WSGI callable is served in-process through ``httpx.WSGITransport``
  under ``http://testserver``;
- a URL string becomes the client's ``base_url``;
- ``None`` means only absolute URLs can be visited.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from browsekit.config import get_settings
from browsekit.errors import DriverError

logger = logging.getLogger(__name__)

TEST_HOST = "http://testserver"
BLANK_URL = "about:blank"


class HttpDriver:
    """Driver that fetches pages with a cookie-keeping ``httpx.Client``."""

    def __init__(self, app: Any = None, *, timeout: float | None = None) -> None:
        if not (app is None or isinstance(app, str) or callable(app)):
            raise DriverError(
                f"The http driver needs a WSGI app, a base URL or None, got {type(app).__name__}"
            )
        self.app = app
        self._base_url = TEST_HOST if callable(app) else app
        self._timeout = get_settings().http_timeout if timeout is None else timeout
        self._client: httpx.Client | None = None
        self._response: httpx.Response | None = None
        self._history: list[str] = []

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            kwargs: dict[str, Any] = {"timeout": self._timeout, "follow_redirects": True}
            if callable(self.app):
                kwargs["transport"] = httpx.WSGITransport(app=self.app)
            if self._base_url is not None:
                kwargs["base_url"] = self._base_url
            self._client = httpx.Client(**kwargs)
        return self._client

    def _request(self, url: str) -> httpx.Response:
        if self._base_url is None and httpx.URL(url).is_relative_url:
            raise DriverError(f"Cannot visit relative URL {url!r} without an application host")
        logger.debug("GET %s", url)
        self._response = self._get_client().get(url)
        return self._response

    def _last_response(self) -> httpx.Response:
        if self._response is None:
            raise DriverError("No page has been visited yet")
        return self._response

    def visit(self, url: str) -> None:
        response = self._request(url)
        self._history.append(str(response.url))

    def current_url(self) -> str:
        if self._response is None:
            return BLANK_URL
        return str(self._response.url)

    def html(self) -> str:
        if self._response is None:
            return ""
        return self._response.text

    def status_code(self) -> int:
        return self._last_response().status_code

    def response_headers(self) -> dict[str, str]:
        return dict(self._last_response().headers)

    def refresh(self) -> None:
        if self._history:
            self._request(self._history[-1])

    def go_back(self) -> None:
        if len(self._history) > 1:
            self._history.pop()
            self._request(self._history[-1])

    def reset(self) -> None:
        if self._client is not None:
            self._client.cookies.clear()
        self._response = None
        self._history.clear()

    def quit(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
        self._response = None
        self._history.clear()
