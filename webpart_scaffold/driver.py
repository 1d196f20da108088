# webpart_scaffold/driver.py
"""
Driver capability consumed by page components.

Components never talk to the browser directly: they go through a DriverHandle,
which owns every wait, timeout and retry. PlaywrightDriver implements the
capability over a Playwright sync Page.

Navigation settling:
    click_and_wait() clicks inside page.expect_navigation(), then
    wait_for_page() blocks until the load state is reached and the
    configured page-ready marker is attached.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional, Protocol

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page as PlaywrightPage
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from webpart_scaffold.config import Settings, get_settings
from webpart_scaffold.errors import ElementNotFoundError, RegionNotFoundError, StalenessError
from webpart_scaffold.locators import Locator

logger = logging.getLogger(__name__)

_STALE_MARKERS = ("not attached", "detached", "execution context was destroyed")


class DriverHandle(Protocol):
    def find_root(self, region_name: str, index: int) -> Any: ...

    def find_child(self, root: Any, locator: Locator) -> Any: ...

    def set_value(self, handle: Any, value: str) -> None: ...

    def get_value(self, handle: Any) -> str: ...

    def click(self, handle: Any) -> None: ...

    def click_and_wait(self, handle: Any) -> None: ...

    def wait_for_page(self) -> None: ...


def _is_stale(error: Exception) -> bool:
    message = str(error).lower()
    return any(marker in message for marker in _STALE_MARKERS)


class PlaywrightDriver:
    """DriverHandle backed by a Playwright sync Page."""

    def __init__(self, page: PlaywrightPage, settings: Optional[Settings] = None):
        self.page = page
        self.settings = settings or get_settings()

    # ==================== Lookup ====================

    def find_root(self, region_name: str, index: int):
        title = self.page.locator(
            self.settings.region_title_selector,
            has_text=re.compile(rf"^\s*{re.escape(region_name)}\s*$"),
        )
        regions = self.page.locator(self.settings.region_selector).filter(has=title)
        try:
            handle = regions.nth(index).element_handle(timeout=self.settings.element_timeout_ms)
        except PlaywrightTimeoutError as e:
            found = regions.count()
            raise RegionNotFoundError(
                region_name, index, detail=f"{found} matching region(s) on page"
            ) from e
        logger.debug(f"Resolved region '{region_name}' [{index}]")
        return handle

    def find_child(self, root, locator: Locator):
        selector = locator.to_selector()
        try:
            handle = root.wait_for_selector(
                selector, state="attached", timeout=self.settings.element_timeout_ms
            )
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, "timed out") from e
        except PlaywrightError as e:
            if _is_stale(e):
                raise StalenessError(f"region root while locating '{selector}'", e) from e
            raise
        if handle is None:
            raise ElementNotFoundError(selector, "no matching element")
        return handle

    # ==================== Actions ====================

    def set_value(self, handle, value: str) -> None:
        self._call(handle, "fill", value)

    def get_value(self, handle) -> str:
        return self._call(handle, "input_value")

    def click(self, handle) -> None:
        self._call(handle, "click")

    def click_and_wait(self, handle) -> None:
        with self.page.expect_navigation(timeout=self.settings.navigation_timeout_ms):
            self.click(handle)
        self.wait_for_page()

    def wait_for_page(self) -> None:
        timeout = self.settings.navigation_timeout_ms
        self.page.wait_for_load_state("load", timeout=timeout)
        self.page.wait_for_selector(self.settings.page_ready_selector, state="attached", timeout=timeout)
        logger.debug(f"Page settled: {self.page.url}")

    def _call(self, handle, method: str, *args):
        try:
            return getattr(handle, method)(*args)
        except PlaywrightError as e:
            if _is_stale(e):
                raise StalenessError(f"{method} on {handle!r}", e) from e
            raise
