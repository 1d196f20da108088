# webpart_scaffold/errors.py
"""
Exception taxonomy shared by the generator and the runtime components.

Generation time:
- SubstitutionError (UnresolvedTokenError, UnknownTokenError,
  InvalidTokenNameError, InvalidTokenValueError)

Component-use time:
- ResolutionError (RegionNotFoundError, SlotNotFoundError)
- StalenessError
"""

from __future__ import annotations

from typing import Iterable, List, Optional


class ScaffoldError(Exception):
    """Base exception for webpart_scaffold errors."""
    pass


# ==================== Substitution ====================

class SubstitutionError(ScaffoldError):
    """Raised when a template cannot be turned into final source text."""
    pass


class UnresolvedTokenError(SubstitutionError):
    """Template references tokens the mapping has no value for."""
    def __init__(self, tokens: Iterable[str]):
        self.tokens: List[str] = sorted(set(tokens))
        super().__init__(f"Unresolved template tokens: {', '.join(self.tokens)}")


class UnknownTokenError(SubstitutionError):
    """Mapping supplies tokens the template never references."""
    def __init__(self, tokens: Iterable[str]):
        self.tokens: List[str] = sorted(set(tokens))
        super().__init__(f"Tokens not referenced by template: {', '.join(self.tokens)}")


class InvalidTokenNameError(SubstitutionError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid token name {name!r} (expected [A-Z_]+)")


class InvalidTokenValueError(SubstitutionError):
    def __init__(self, token: str, value: str, reason: str):
        self.token = token
        self.value = value
        super().__init__(f"Invalid value {value!r} for {token}: {reason}")


# ==================== Resolution ====================

class ResolutionError(ScaffoldError):
    """An element of a web part could not be located on the current page."""
    def __init__(
        self,
        region_name: str,
        index: int,
        slot_name: Optional[str] = None,
        detail: str = "",
    ):
        self.region_name = region_name
        self.index = index
        self.slot_name = slot_name
        self.detail = detail
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f"region '{self.region_name}' (index {self.index})"
        if self.slot_name:
            where = f"slot '{self.slot_name}' in {where}"
        msg = f"Could not resolve {where}"
        return f"{msg}: {self.detail}" if self.detail else msg


class RegionNotFoundError(ResolutionError):
    pass


class SlotNotFoundError(ResolutionError):
    pass


class ElementNotFoundError(ScaffoldError):
    """Driver-level miss for a selector; components re-raise it as SlotNotFoundError."""
    def __init__(self, selector: str, detail: str = ""):
        self.selector = selector
        self.detail = detail
        super().__init__(f"No element for '{selector}'" + (f": {detail}" if detail else ""))


class StalenessError(ScaffoldError):
    """A cached handle no longer refers to a live element."""
    def __init__(self, description: str, original_error: Optional[Exception] = None):
        self.description = description
        self.original_error = original_error
        msg = f"Stale element handle: {description}"
        if original_error is not None:
            msg = f"{msg} ({original_error})"
        super().__init__(msg)
