"""FastAPI wiring for rendering page assets."""

from fastapi import FastAPI, HTTPException, Request

from ..application import Application
from ..assets.host import PageAssets


def install_assets(app: FastAPI, application: Application) -> None:
    """Attach a loaded application to a FastAPI app."""
    app.state.assets_application = application


def get_assets_application(request: Request) -> Application:
    application: Application | None = getattr(
        request.app.state, "assets_application", None
    )
    if application is None:
        raise HTTPException(status_code=503, detail="Assets are not loaded")
    return application


async def get_page_assets(request: Request) -> PageAssets:
    """Render the page's asset markup once for the current request.

    Must stay a coroutine: emitting and rendering share the host buffer.
    """
    return get_assets_application(request).render_assets()
