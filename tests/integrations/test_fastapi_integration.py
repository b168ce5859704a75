"""Tests for the FastAPI integration."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse
from httpx import ASGITransport, AsyncClient

from assets_provider.application import bootstrap
from assets_provider.assets.host import PageAssets
from assets_provider.config import Configuration
from assets_provider.integrations.fastapi import get_page_assets, install_assets


def _create_app() -> FastAPI:
    app = FastAPI()

    @app.get("/", response_class=HTMLResponse)
    def index(assets: PageAssets = Depends(get_page_assets)) -> str:
        return f"<head>{assets.head}</head><body>{assets.footer}</body>"

    return app


@pytest_asyncio.fixture
async def client(settings) -> AsyncGenerator[AsyncClient, None]:
    app = _create_app()
    install_assets(
        app,
        bootstrap(
            Configuration(
                {
                    "assets": [
                        {"type": "style", "handle": "theme", "name": "theme"},
                        {"type": "script", "handle": "app", "name": "app"},
                    ]
                }
            ),
            settings=settings,
        ),
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


@pytest.mark.asyncio
async def test_page_contains_assets(client: AsyncClient) -> None:
    response = await client.get("/")

    assert response.status_code == 200
    assert (
        '<link rel="stylesheet" id="theme-css" '
        'href="http://example.com/assets/theme.css" media="all">'
    ) in response.text
    assert (
        '<body><script id="app-js" src="http://example.com/assets/app.js"></script>'
        in response.text
    )


@pytest.mark.asyncio
async def test_assets_rendered_for_every_request(client: AsyncClient) -> None:
    first = await client.get("/")
    second = await client.get("/")

    assert first.text == second.text
    assert second.text.count("app-js") == 1


@pytest.mark.asyncio
async def test_missing_application_returns_503() -> None:
    async with AsyncClient(
        transport=ASGITransport(app=_create_app()), base_url="http://test"
    ) as ac:
        response = await ac.get("/")

    assert response.status_code == 503
