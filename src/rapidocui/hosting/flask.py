"""Serve the RapiDoc page from a Flask application."""

from __future__ import annotations

import logging
from typing import Final

from flask import Blueprint, Flask, Request, Response, request

from rapidocui.errors import RapiDocError
from rapidocui.render import ErrorRenderer, TemplateRenderer
from rapidocui.settings.rapidoc import RapiDocSettings

logger: Final = logging.getLogger(__name__)


class FlaskRequestContext:
    """Request context backed by a Flask request.

    The base path is the WSGI ``SCRIPT_NAME`` (``request.script_root``).
    """

    def __init__(self, flask_request: Request) -> None:
        self._request = flask_request

    @property
    def base_path(self) -> str:
        return self._request.script_root.rstrip("/")


def create_blueprint(
    settings: RapiDocSettings | None = None,
    renderer: TemplateRenderer | None = None,
    error_renderer: ErrorRenderer | None = None,
    name: str = "rapidoc",
) -> Blueprint:
    """Create a blueprint serving the RapiDoc page at ``settings.path``.

    Args:
        settings: RapiDoc settings (default settings if None)
        renderer: Template renderer (packaged template if None)
        error_renderer: Renderer for the failure page
        name: Blueprint name

    Returns:
        Blueprint to register on the application
    """
    settings = settings or RapiDocSettings()
    renderer = renderer or TemplateRenderer()
    error_renderer = error_renderer or ErrorRenderer()

    bp = Blueprint(name, __name__)

    @bp.get(settings.path)
    def rapidoc_ui() -> Response:
        html = renderer.render(settings, FlaskRequestContext(request))
        logger.debug("Rendered RapiDoc page for %s", request.path)
        return Response(html, mimetype="text/html")

    @bp.errorhandler(RapiDocError)
    def rapidoc_error(exc: RapiDocError) -> Response:
        logger.error("RapiDoc render failed for %s: %s", request.path, exc)
        return Response(error_renderer.render_error(exc), status=500, mimetype="text/html")

    return bp


def use_rapidoc(
    app: Flask,
    settings: RapiDocSettings | None = None,
    renderer: TemplateRenderer | None = None,
    error_renderer: ErrorRenderer | None = None,
) -> RapiDocSettings:
    """Register the RapiDoc page on a Flask application.

    Returns:
        The settings instance used by the route
    """
    settings = settings or RapiDocSettings()
    app.register_blueprint(create_blueprint(settings, renderer, error_renderer))
    logger.info("RapiDoc UI served at %s", settings.path)
    return settings
