"""
webpart_scaffold: generate lazy, cached page components for portal web parts.
"""

from webpart_scaffold.components import BodyWebPart, Component, ElementCache, Input, Region, find_when_needed
from webpart_scaffold.errors import (
    RegionNotFoundError,
    ResolutionError,
    ScaffoldError,
    SlotNotFoundError,
    StalenessError,
    SubstitutionError,
    UnknownTokenError,
    UnresolvedTokenError,
)
from webpart_scaffold.locators import Locator
from webpart_scaffold.pages import Page
from webpart_scaffold.substitution import module_tokens, substitute

__version__ = "0.1.0"

__all__ = [
    "BodyWebPart",
    "Component",
    "ElementCache",
    "Input",
    "Locator",
    "Page",
    "Region",
    "RegionNotFoundError",
    "ResolutionError",
    "ScaffoldError",
    "SlotNotFoundError",
    "StalenessError",
    "SubstitutionError",
    "UnknownTokenError",
    "UnresolvedTokenError",
    "find_when_needed",
    "module_tokens",
    "substitute",
]
