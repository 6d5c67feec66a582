"""Page rendering for the RapiDoc UI."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Final, Optional

from jinja2 import BaseLoader, Environment, PackageLoader, Template, select_autoescape

from rapidocui.protocols import RequestContext
from rapidocui.settings.base import UiSettingsBase

logger: Final = logging.getLogger(__name__)

DEFAULT_TEMPLATE: Final = "index.html"


class TemplateRenderer:
    """Loads the RapiDoc page template and fills it for each request.

    The template is a static asset read through a Jinja2 loader, but it is
    not evaluated by Jinja: settings are substituted as literal tokens by
    :meth:`UiSettingsBase.transform_html`. The raw source is read once and
    reused for every request.
    """

    def __init__(
        self,
        loader: Optional[BaseLoader] = None,
        template_name: str = DEFAULT_TEMPLATE,
    ) -> None:
        """Initialize the template renderer.

        Args:
            loader: Jinja2 loader to read the template from (default: packaged templates)
            template_name: Name of the template within the loader
        """
        self.env = Environment(
            loader=loader or PackageLoader("rapidocui", "templates"),
            autoescape=select_autoescape(["html"]),
        )
        self.template_name = template_name
        self._source: str | None = None

    @property
    def template_source(self) -> str:
        """Raw template text, loaded on first use."""
        if self._source is None:
            assert self.env.loader is not None
            source, filename, _ = self.env.loader.get_source(self.env, self.template_name)
            logger.debug("Loaded RapiDoc template from %s", filename)
            self._source = source
        return self._source

    def render(self, settings: UiSettingsBase, request: RequestContext) -> str:
        """Render the UI page for one request.

        Args:
            settings: UI settings to substitute into the template
            request: Context of the inbound request

        Returns:
            Rendered HTML

        Raises:
            EnumParseError: If a stored enum attribute is invalid
        """
        return settings.transform_html(self.template_source, request)


class ErrorRenderer:
    """Renderer for the page returned when the UI cannot be rendered."""

    # Error page template using Jinja2 syntax
    ERROR_TEMPLATE = """<!DOCTYPE html>
    <html>
    <head>
        <meta charset="UTF-8">
        <title>{{ title }}</title>
        <style>
            body {
                font-family: 'Open Sans', Arial, sans-serif;
                text-align: center;
                padding: 40px;
            }
            .error-container {
                border: 2px solid #c0392b;
                border-radius: 8px;
                padding: 24px;
                margin: 40px auto;
                max-width: 720px;
            }
            .error-title {
                font-size: 28px;
                margin-bottom: 16px;
                font-weight: bold;
            }
            .error-message {
                font-family: monospace;
                font-size: 16px;
                margin-bottom: 16px;
            }
            .error-time {
                font-size: 14px;
                font-style: italic;
            }
        </style>
    </head>
    <body>
        <div class="error-container">
            <div class="error-title">{{ title }}</div>
            <div class="error-message">{{ error_message }}</div>
            <div class="error-time">{{ timestamp }}</div>
        </div>
    </body>
    </html>"""

    def __init__(self, template: str | None = None) -> None:
        """Initialize the error renderer.

        Args:
            template: Custom error template (uses default if None)
        """
        env = Environment(autoescape=True)
        self.template: Template = env.from_string(template or self.ERROR_TEMPLATE)

    def render_error(self, error: Exception, title: str = "API documentation unavailable") -> str:
        """Render an error page for a failed UI render.

        The error message is HTML-escaped.

        Args:
            error: Exception raised while rendering
            title: Heading shown above the message

        Returns:
            Rendered HTML
        """
        return self.template.render(
            title=title,
            error_message=str(error),
            timestamp=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        )
