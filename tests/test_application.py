"""Tests for the application bootstrap."""

from unittest.mock import Mock

import pytest

from assets_provider.application import bootstrap
from assets_provider.assets.host import HtmlAssetHost
from assets_provider.assets.registry import AssetRegistry
from assets_provider.config import Configuration, load_configuration
from assets_provider.errors import AssetMetadataError, InvalidAssetDefinitionError
from assets_provider.hooks import ENQUEUE_ASSETS


class TestBootstrap:
    def test_returns_loaded_application(self, settings) -> None:
        application = bootstrap(
            Configuration(
                {"assets": [{"type": "style", "handle": "theme", "name": "theme"}]}
            ),
            settings=settings,
        )

        assert isinstance(application.registry, AssetRegistry)
        assert application.registry.get_style("theme") is not None
        assert isinstance(application.host, HtmlAssetHost)
        assert len(application.hooks.actions(ENQUEUE_ASSETS)) == 1

    def test_emit_forwards_to_host(self, settings, host: Mock) -> None:
        application = bootstrap(
            Configuration(
                {"assets": [{"type": "script", "handle": "app", "name": "app"}]}
            ),
            settings=settings,
            host=host,
        )

        application.emit()

        host.enqueue_script.assert_called_once_with("app")

    def test_invalid_definition_propagates(self, settings) -> None:
        with pytest.raises(InvalidAssetDefinitionError):
            bootstrap(
                Configuration({"assets": [{"type": "script"}]}), settings=settings
            )

    def test_render_assets(self, settings, fixtures_dir, root_directory) -> None:
        languages = root_directory / "languages"
        languages.mkdir()
        (languages / "app.json").write_text('{"locale_data": {}}')

        application = bootstrap(
            load_configuration(fixtures_dir / "assets.yaml"), settings=settings
        )

        page = application.render_assets()

        assert page.head.splitlines() == [
            '<link rel="preload" href="http://example.com/static/app.js" as="script">',
            '<link rel="stylesheet" id="theme-css" '
            'href="http://example.com/static/theme.css" media="screen">',
            '<script type="application/json" id="app-translations-app">'
            '{"locale_data": {}}</script>',
            '<script id="app-js" src="http://example.com/static/app.js" '
            'data-i18n-domains="fallback"></script>',
        ]
        assert page.footer == ""

    def test_render_assets_once_per_call(self, settings) -> None:
        application = bootstrap(
            Configuration(
                {"assets": [{"type": "style", "handle": "theme", "name": "theme"}]}
            ),
            settings=settings,
        )

        first = application.render_assets()
        second = application.render_assets()

        assert first == second
        assert first.head.count("theme-css") == 1

    def test_render_assets_requires_html_host(self, settings, host: Mock) -> None:
        application = bootstrap(Configuration({}), settings=settings, host=host)

        with pytest.raises(TypeError):
            application.render_assets()

    def test_render_after_failed_emit_starts_clean(
        self, settings, root_directory
    ) -> None:
        application = bootstrap(
            Configuration(
                {
                    "assets": [
                        {
                            "type": "style",
                            "handle": "theme",
                            "name": "theme",
                            "preload": True,
                        },
                        {"type": "script", "handle": "app", "name": "app"},
                    ]
                }
            ),
            settings=settings,
        )
        metadata = root_directory / "assets" / "app.asset.json"
        metadata.write_text("{not json")

        with pytest.raises(AssetMetadataError):
            application.render_assets()

        metadata.write_text('{"version": "2"}')
        page = application.render_assets()

        assert page.head.count("theme-css") == 1
        assert page.head.count('rel="preload"') == 1
