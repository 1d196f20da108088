# webpart_scaffold/locators.py
"""Locator specifications for sub-elements of a web part."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


def css_string(value: str) -> str:
    """Quote value as a CSS string literal; non-ASCII text is kept as is."""
    out = []
    for ch in value:
        if ch in ('"', "\\"):
            out.append("\\" + ch)
        elif ch < " " or ch == "\x7f":
            # Hex escape, trailing space terminates it
            out.append(f"\\{ord(ch):x} ")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


@dataclass(frozen=True)
class Locator:
    """
    Immutable description of an element relative to a region root.

    Built fluently and rendered to a Playwright selector:
        Locator.tag("button").with_text("Save").to_selector()
        -> 'button:text-is("Save")'
    """
    css: str
    text: Optional[str] = None

    @classmethod
    def tag(cls, tag_name: str) -> "Locator":
        return cls(css=tag_name)

    @classmethod
    def css_selector(cls, selector: str) -> "Locator":
        return cls(css=selector)

    @classmethod
    def id(cls, element_id: str) -> "Locator":
        return cls(css=f"[id={css_string(element_id)}]")

    @classmethod
    def name(cls, name: str) -> "Locator":
        return cls(css=f"[name={css_string(name)}]")

    def with_text(self, text: str) -> "Locator":
        """Match elements whose full text is exactly text."""
        return replace(self, text=text)

    def to_selector(self) -> str:
        if self.text is None:
            return self.css
        return f"{self.css}:text-is({css_string(self.text)})"

    def __str__(self) -> str:
        return self.to_selector()
