# webpart_scaffold/pages.py
"""Page-level objects returned by navigating component actions."""

from __future__ import annotations

from typing import Type, TypeVar

from webpart_scaffold.driver import DriverHandle

C = TypeVar("C")


class Page:
    """
    The page the browser is on after a navigation has settled.

    Components found through a Page are always fresh instances, so nothing
    cached before the navigation leaks into the new page.
    """

    def __init__(self, driver: DriverHandle):
        self._driver = driver

    @property
    def driver(self) -> DriverHandle:
        return self._driver

    def web_part(self, component_cls: Type[C], index: int = 0) -> C:
        return component_cls(self._driver, index)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
