"""Tests for locator specifications and their selector rendering."""
import pytest

from webpart_scaffold.locators import Locator, css_string


class TestFactories:

    def test_tag(self):
        assert Locator.tag("input").to_selector() == "input"

    def test_css_selector_passes_through(self):
        assert Locator.css_selector("div.panel > input[type='text']").to_selector() == "div.panel > input[type='text']"

    def test_id(self):
        assert Locator.id("save-button").to_selector() == '[id="save-button"]'

    def test_name(self):
        assert Locator.name("title").to_selector() == '[name="title"]'

    def test_with_text(self):
        assert Locator.tag("button").with_text("Save").to_selector() == 'button:text-is("Save")'

    def test_with_text_returns_new_locator(self):
        base = Locator.tag("button")
        assert base.with_text("Save") is not base
        assert base.text is None

    def test_str_is_selector(self):
        assert str(Locator.name("q")) == '[name="q"]'

    def test_hashable_value(self):
        assert Locator.tag("a").with_text("x") == Locator.tag("a").with_text("x")
        assert len({Locator.tag("a"), Locator.tag("a")}) == 1


class TestQuoting:

    def test_non_ascii_text_kept_verbatim(self):
        selector = Locator.tag("button").with_text("Enregistré").to_selector()
        assert selector == 'button:text-is("Enregistré")'
        assert "\\u" not in selector

    def test_non_ascii_id_and_name(self):
        assert Locator.id("résumé").to_selector() == '[id="résumé"]'
        assert Locator.name("名前").to_selector() == '[name="名前"]'

    @pytest.mark.parametrize(
        "value, expected",
        [
            ('say "hi"', '"say \\"hi\\""'),
            ("back\\slash", '"back\\\\slash"'),
            ("line\nbreak", '"line\\a break"'),
            ("", '""'),
        ],
    )
    def test_css_string_escapes(self, value, expected):
        assert css_string(value) == expected
