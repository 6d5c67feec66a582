"""Serve the RapiDoc page from a FastAPI (Starlette) application."""

from __future__ import annotations

import logging
from typing import Final

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from rapidocui.errors import RapiDocError
from rapidocui.render import ErrorRenderer, TemplateRenderer
from rapidocui.settings.rapidoc import RapiDocSettings

logger: Final = logging.getLogger(__name__)


class StarletteRequestContext:
    """Request context backed by a Starlette request.

    The base path is the ASGI ``root_path``, set when the application is
    mounted under a prefix or served behind a proxy.
    """

    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def base_path(self) -> str:
        return str(self._request.scope.get("root_path", "")).rstrip("/")


def use_rapidoc(
    app: FastAPI,
    settings: RapiDocSettings | None = None,
    renderer: TemplateRenderer | None = None,
    error_renderer: ErrorRenderer | None = None,
) -> RapiDocSettings:
    """Register the RapiDoc page on a FastAPI application.

    Adds a GET route at ``settings.path`` returning the rendered page, and
    an exception handler turning :class:`RapiDocError` into an HTML 500
    response.

    Args:
        app: Application to register the route on
        settings: RapiDoc settings (default settings if None)
        renderer: Template renderer (packaged template if None)
        error_renderer: Renderer for the failure page

    Returns:
        The settings instance used by the route
    """
    settings = settings or RapiDocSettings()
    renderer = renderer or TemplateRenderer()
    error_renderer = error_renderer or ErrorRenderer()

    async def rapidoc_ui(request: Request) -> HTMLResponse:
        html = renderer.render(settings, StarletteRequestContext(request))
        logger.debug("Rendered RapiDoc page for %s", request.url.path)
        return HTMLResponse(html)

    async def rapidoc_error(request: Request, exc: Exception) -> HTMLResponse:
        logger.error("RapiDoc render failed for %s: %s", request.url.path, exc)
        return HTMLResponse(error_renderer.render_error(exc), status_code=500)

    app.add_api_route(
        settings.path,
        rapidoc_ui,
        methods=["GET"],
        response_class=HTMLResponse,
        include_in_schema=False,
    )
    app.add_exception_handler(RapiDocError, rapidoc_error)
    logger.info("RapiDoc UI served at %s", settings.path)
    return settings
