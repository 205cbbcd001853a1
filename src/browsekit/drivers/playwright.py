"""Playwright driver — a real Chromium page for JavaScript-dependent tests.

Requires the ``browser`` extra (``pip install browsekit[browser]``) and
``playwright install chromium``. The browser is launched on first use.
"""

from __future__ import annotations

import logging
from typing import Any

from playwright.sync_api import sync_playwright

from browsekit.config import get_settings
from browsekit.errors import DriverError

logger = logging.getLogger(__name__)

BLANK_URL = "about:blank"


class PlaywrightDriver:
    """Driver running a single Chromium page through the sync Playwright API."""

    def __init__(self, app: Any = None, *, headless: bool | None = None) -> None:
        if app is not None and not isinstance(app, str):
            raise DriverError(
                "The playwright driver needs a base URL as application handle, "
                f"got {type(app).__name__}"
            )
        self.app = app
        self._headless = get_settings().headless if headless is None else headless
        self._playwright = None
        self._browser = None
        self._context = None
        self._page = None
        self._response = None

    def _get_page(self):
        if self._page is None:
            logger.debug("Launching chromium (headless=%s)", self._headless)
            self._playwright = sync_playwright().start()
            self._browser = self._playwright.chromium.launch(headless=self._headless)
            self._context = self._browser.new_context(base_url=self.app)
            self._page = self._context.new_page()
        return self._page

    def _last_response(self):
        if self._response is None:
            raise DriverError("No page has been visited yet")
        return self._response

    def visit(self, url: str) -> None:
        self._response = self._get_page().goto(url)

    def current_url(self) -> str:
        if self._page is None:
            return BLANK_URL
        return self._page.url

    def html(self) -> str:
        if self._page is None:
            return ""
        return self._page.content()

    def status_code(self) -> int:
        return self._last_response().status

    def response_headers(self) -> dict[str, str]:
        return dict(self._last_response().headers)

    def refresh(self) -> None:
        if self._page is not None:
            self._response = self._page.reload()

    def go_back(self) -> None:
        if self._page is not None:
            response = self._page.go_back()
            if response is not None:
                self._response = response

    def reset(self) -> None:
        if self._context is not None:
            self._context.clear_cookies()
            self._page.goto(BLANK_URL)
        self._response = None

    def quit(self) -> None:
        if self._context is not None:
            self._context.close()
            self._browser.close()
            self._playwright.stop()
        self._playwright = self._browser = self._context = self._page = None
        self._response = None
