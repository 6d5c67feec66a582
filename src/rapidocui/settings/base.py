"""Settings shared by documentation UIs served from an application route."""

from __future__ import annotations

from urllib.parse import urlsplit

from rapidocui.protocols import RequestContext

DEFAULT_UI_PATH = "/swagger"
DEFAULT_DOCUMENT_PATH = "/swagger/{documentName}/swagger.json"
DEFAULT_DOCUMENT_NAME = "v1"


class UiSettingsBase:
    """Host-independent settings for a documentation UI page.

    Holds the route the page is served under, where the OpenAPI document
    lives, and optional custom assets. Subclasses implement
    :meth:`transform_html` to fill their HTML template.

    Settings objects are meant to be configured once at startup and shared
    between requests. Writes are not synchronized, so mutate only before the
    application accepts traffic.
    """

    def __init__(
        self,
        path: str = DEFAULT_UI_PATH,
        document_path: str = DEFAULT_DOCUMENT_PATH,
        document_name: str = DEFAULT_DOCUMENT_NAME,
    ) -> None:
        self.path = path
        self.document_path = document_path
        self.document_name = document_name
        self.custom_stylesheet_path: str | None = None
        self.custom_javascript_path: str | None = None
        self.custom_inline_styles: str | None = None

    @staticmethod
    def resolve_url(url: str, request: RequestContext) -> str:
        """Prefix a relative URL with the request's base path.

        Absolute URLs (with a scheme or host) are returned unchanged.

        Args:
            url: Absolute URL or application-relative path
            request: Context of the request being rendered

        Returns:
            URL usable from the rendered page
        """
        parts = urlsplit(url)
        if parts.scheme or parts.netloc:
            return url
        base = request.base_path.rstrip("/")
        return f"{base}/{url.lstrip('/')}"

    def get_document_url(self, request: RequestContext) -> str:
        """URL of the OpenAPI document for the configured document name."""
        path = self.document_path.replace("{documentName}", self.document_name)
        return self.resolve_url(path, request)

    def get_custom_style_html(self, request: RequestContext) -> str:
        """Markup for the custom stylesheet link and inline styles, if any."""
        html = ""
        if self.custom_stylesheet_path:
            href = self.resolve_url(self.custom_stylesheet_path, request)
            html += f'<link rel="stylesheet" href="{href}">'
        if self.custom_inline_styles:
            html += f'<style type="text/css">{self.custom_inline_styles}</style>'
        return html

    def get_custom_script_html(self, request: RequestContext) -> str:
        """Markup for the custom script tag, if any."""
        if not self.custom_javascript_path:
            return ""
        src = self.resolve_url(self.custom_javascript_path, request)
        return f'<script src="{src}"></script>'

    def transform_html(self, html: str, request: RequestContext) -> str:
        """Fill the UI template for one request.

        Abstract: each UI subclass owns its template tokens and overrides this.

        Raises:
            NotImplementedError: Always, on the base class
        """
        raise NotImplementedError
