"""Tests for Script and Style value objects."""

import pytest

from assets_provider.assets.script import Script, ScriptLocation
from assets_provider.assets.style import Style


class TestStyle:
    def test_defaults(self) -> None:
        style = Style("h", "n")

        assert style.media == "all"
        assert style.preloaded is False
        assert style.file_name == "n.css"

    def test_setters_chain(self) -> None:
        style = Style("h", "n").for_media("print").preload(True)

        assert isinstance(style, Style)
        assert style.media == "print"
        assert style.preloaded is True


class TestScript:
    def test_defaults(self) -> None:
        script = Script("h", "n")

        assert script.location is ScriptLocation.FOOTER
        assert script.translations == {}
        assert script.file_name == "n.js"

    def test_setters_chain(self) -> None:
        script = (
            Script("h", "n")
            .load_in("head")
            .with_translation("d", "/srv/d.json")
            .with_translation("e", None)
            .preload(True)
        )

        assert script.location is ScriptLocation.HEAD
        assert script.translations == {"d": "/srv/d.json", "e": None}
        assert script.preloaded is True

    def test_rebinding_domain_replaces_path(self) -> None:
        script = Script("h", "n").with_translation("d", "a").with_translation("d", "b")

        assert script.translations == {"d": "b"}

    def test_invalid_location(self) -> None:
        with pytest.raises(ValueError):
            Script("h", "n").load_in("sidebar")

    def test_translations_are_a_copy(self) -> None:
        script = Script("h", "n").with_translation("d", None)
        script.translations["x"] = "y"

        assert "x" not in script.translations
