# webpart_scaffold/components.py
"""
Lazy Components with Element Cache

A component represents one occurrence of a named region of a page (a web part)
and gives memoized access to its interactive sub-elements.

- Construction never touches the page
- The region root is resolved on first use, then pinned
- Each slot is resolved relative to the root on first access, then pinned
- A failed resolution caches nothing, so a later access retries
- Stale handles are not caught here; clear_element_cache() or a fresh
  instance is the recovery

Mutation methods return the component itself; navigating methods return a
new Page.

Usage:
    class WikiWebPart(BodyWebPart):
        def __init__(self, driver, index=0):
            super().__init__(driver, "Wiki", index)

        class ElementCache(BodyWebPart.ElementCache):
            save = find_when_needed(Locator.tag("button").with_text("Save"))
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from webpart_scaffold.driver import DriverHandle
from webpart_scaffold.errors import ElementNotFoundError, RegionNotFoundError, SlotNotFoundError
from webpart_scaffold.locators import Locator

logger = logging.getLogger(__name__)


# ==================== Region ====================

class Region:
    """One occurrence of a named region; resolves its root lazily and its children on request."""

    def __init__(self, driver: DriverHandle, name: str, index: int = 0):
        self.driver = driver
        self.name = name
        self.index = index
        self._root: Any = None

    @property
    def is_resolved(self) -> bool:
        return self._root is not None

    def resolve_root(self) -> Any:
        if self._root is None:
            root = self.driver.find_root(self.name, self.index)
            if root is None:
                raise RegionNotFoundError(self.name, self.index, detail="driver returned no element")
            self._root = root
            logger.debug(f"Resolved root of {self}")
        return self._root

    def resolve_child(self, slot_name: str, locator: Locator) -> Any:
        root = self.resolve_root()
        try:
            return self.driver.find_child(root, locator)
        except ElementNotFoundError as e:
            raise SlotNotFoundError(self.name, self.index, slot_name, detail=str(e)) from e

    def __str__(self) -> str:
        return f"region '{self.name}' [{self.index}]"


# ==================== Slots ====================

class Slot:
    """Descriptor for a sub-element declared on an ElementCache."""

    def __init__(self, locator: Locator, wrapper: Optional[Callable[[Any, DriverHandle], Any]] = None):
        self.locator = locator
        self.wrapper = wrapper
        self.name: Optional[str] = None

    def __set_name__(self, owner, name: str) -> None:
        self.name = name

    def __get__(self, cache: Optional["ElementCache"], owner=None):
        if cache is None:
            return self
        return cache.resolve(self)

    def __repr__(self) -> str:
        return f"Slot({self.name!r}, {self.locator})"


def find_when_needed(locator: Locator, wrapper: Optional[Callable[[Any, DriverHandle], Any]] = None) -> Slot:
    """Declare a slot that is located on first access and reused afterwards."""
    return Slot(locator, wrapper)


class ElementCache:
    """Per-instance holder of a component's resolved root and slots."""

    def __init__(self, component: "Component"):
        self._region = component.new_region()
        self._slots: Dict[str, Any] = {}

    @property
    def driver(self) -> DriverHandle:
        return self._region.driver

    @property
    def region(self) -> Region:
        return self._region

    @property
    def root(self) -> Any:
        return self._region.resolve_root()

    def resolve(self, slot: Slot) -> Any:
        try:
            return self._slots[slot.name]
        except KeyError:
            pass
        handle = self._region.resolve_child(slot.name, slot.locator)
        if slot.wrapper is not None:
            handle = slot.wrapper(handle, self.driver)
        self._slots[slot.name] = handle
        logger.debug(f"Resolved slot '{slot.name}' in {self._region}")
        return handle

    def resolved_slots(self) -> List[str]:
        return list(self._slots)


# ==================== Components ====================

class Component:
    """Base for region-scoped page components."""

    ElementCache = ElementCache

    def __init__(self, driver: DriverHandle, region_name: str, index: int = 0):
        if index < 0:
            raise ValueError(f"index must be >= 0, got {index}")
        self._driver = driver
        self._region_name = region_name
        self._index = index
        self._element_cache: Optional[ElementCache] = None

    @property
    def driver(self) -> DriverHandle:
        return self._driver

    @property
    def region_name(self) -> str:
        return self._region_name

    @property
    def index(self) -> int:
        return self._index

    def new_region(self) -> Region:
        return Region(self._driver, self._region_name, self._index)

    def new_element_cache(self) -> ElementCache:
        return self.ElementCache(self)

    def element_cache(self) -> ElementCache:
        if self._element_cache is None:
            self._element_cache = self.new_element_cache()
        return self._element_cache

    def clear_element_cache(self) -> None:
        """Forget the root and every slot; the next access re-resolves."""
        self._element_cache = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._region_name!r}, index={self._index})"


class BodyWebPart(Component):
    """A portal web part in the page body, found by its title."""

    def __init__(self, driver: DriverHandle, title: str, index: int = 0):
        super().__init__(driver, title, index)

    @property
    def title(self) -> str:
        return self.region_name


# ==================== Element Wrappers ====================

class Input:
    """Text input wrapper; applies values through the driver."""

    def __init__(self, handle: Any, driver: DriverHandle):
        self.handle = handle
        self._driver = driver

    def set(self, value: str) -> "Input":
        self._driver.set_value(self.handle, value)
        return self

    def get(self) -> str:
        return self._driver.get_value(self.handle)
