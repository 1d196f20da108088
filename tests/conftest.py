"""Pytest configuration and shared fakes for webpart_scaffold tests."""
import sys
from collections import Counter
from pathlib import Path

import pytest

# Flat layout: make the project root importable without installation
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from webpart_scaffold.config import get_settings  # noqa: E402
from webpart_scaffold.errors import ElementNotFoundError, RegionNotFoundError, StalenessError  # noqa: E402


class FakeHandle:
    def __init__(self, description: str):
        self.description = description
        self.value = ""
        self.clicks = 0
        self.stale = False

    def __repr__(self):
        return f"FakeHandle({self.description!r})"


class FakeDriver:
    """Call-counting DriverHandle over an in-memory page of named regions."""

    def __init__(self, regions=None, missing_selectors=()):
        self.regions = dict(regions if regions is not None else {"Wiki": 2})
        self.missing_selectors = set(missing_selectors)
        self.calls = Counter()
        self.navigations = 0

    def find_root(self, region_name, index):
        self.calls["find_root"] += 1
        found = self.regions.get(region_name, 0)
        if index >= found:
            raise RegionNotFoundError(region_name, index, detail=f"{found} matching region(s) on page")
        return FakeHandle(f"{region_name}[{index}]")

    def find_child(self, root, locator):
        self.calls["find_child"] += 1
        self._check(root)
        selector = locator.to_selector()
        if selector in self.missing_selectors:
            raise ElementNotFoundError(selector, "no matching element")
        return FakeHandle(f"{root.description} >> {selector}")

    def set_value(self, handle, value):
        self.calls["set_value"] += 1
        self._check(handle)
        handle.value = value

    def get_value(self, handle):
        self._check(handle)
        return handle.value

    def click(self, handle):
        self.calls["click"] += 1
        self._check(handle)
        handle.clicks += 1

    def click_and_wait(self, handle):
        self.click(handle)
        self.navigations += 1
        self.wait_for_page()

    def wait_for_page(self):
        self.calls["wait_for_page"] += 1

    def _check(self, handle):
        if handle.stale:
            raise StalenessError(repr(handle))


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from WEBPART_* variables and the cached Settings."""
    import os

    for key in list(os.environ):
        if key.startswith("WEBPART_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
