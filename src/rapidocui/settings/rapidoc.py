"""Typed settings for the RapiDoc web component."""

from __future__ import annotations

import json
import re
from typing import Any

from rapidocui.common.enums import (
    DefaultSchemaTab,
    FontSize,
    Layout,
    NavItemSpacing,
    RenderStyle,
    SchemaHideReadOnly,
    SchemaHideWriteOnly,
    SchemaStyle,
    SortEndpointsBy,
    Theme,
)
from rapidocui.protocols import RequestContext
from rapidocui.settings.attributes import (
    Attribute,
    BoolAttribute,
    EnumAttribute,
    StrAttribute,
)
from rapidocui.settings.base import UiSettingsBase

RAPIDOC_SCRIPT_URL = "https://unpkg.com/rapidoc/dist/rapidoc-min.js"
DEFAULT_DOCUMENT_TITLE = "RapiDoc UI"
REGULAR_FONT = "'Open Sans', Avenir, 'Segoe UI', Arial, sans-serif"
MONO_FONT = "Monaco, 'Andale Mono', 'Roboto Mono', 'Consolas' monospace"

# Literal tokens replaced in the HTML template
TEMPLATE_TOKENS = (
    "{AdditionalAttributes}",
    "{CustomStyle}",
    "{CustomScript}",
    "{DocumentTitle}",
    "{CustomHeadContent}",
    "{Url}",
    "{ScriptUrl}",
)
_TOKEN_PATTERN = re.compile("|".join(re.escape(token) for token in TEMPLATE_TOKENS))


class RapiDocSettings(UiSettingsBase):
    """Settings for serving RapiDoc.

    Every RapiDoc attribute is a typed property backed by one entry of
    :attr:`additional_settings`. The whole map is serialized to JSON and
    applied to the ``<rapi-doc>`` element by the page template, so anything
    written to the map directly also reaches the browser.

    Examples:
        settings = RapiDocSettings()
        settings.theme = Theme.LIGHT
        settings.sort_endpoints_by = SortEndpointsBy.METHOD
        html = settings.transform_html(template, StaticRequestContext("/api"))
    """

    # ---- general ----
    update_route = BoolAttribute(
        "update-route", True, "Sync the browser URL with the visited section"
    )
    route_prefix = StrAttribute("route-prefix", None, "Prefix added to each operation route")
    sort_tags = BoolAttribute("sort-tags", False, "List tags in alphabetic order")
    sort_endpoints_by = EnumAttribute(
        "sort-endpoints-by", SortEndpointsBy, SortEndpointsBy.PATH, "Sort endpoints within each tag"
    )
    heading_text = StrAttribute("heading-text", None, "Heading text on the top-left corner")
    goto_path = StrAttribute(
        "goto-path", None, "Location (method and path) to scroll to once the spec is loaded"
    )
    fill_request_fields_with_example = BoolAttribute(
        "fill-request-fields-with-example", True, "Prefill request fields with spec examples"
    )
    persist_auth = BoolAttribute("persist-auth", False, "Persist authentication to localStorage")

    # ---- colors and fonts ----
    theme = EnumAttribute("theme", Theme, Theme.DARK, "Base theme used to compute UI colors")
    bg_color = StrAttribute("bg-color", None, "Hex color code for the main background")
    text_color = StrAttribute("text-color", None, "Hex color code for text")
    header_color = StrAttribute("header-color", None, "Hex color code for the header background")
    primary_color = StrAttribute(
        "primary-color", None, "Hex color code for controls such as buttons and tabs"
    )
    load_fonts = BoolAttribute("load-fonts", True, "Load fonts from the CDN")
    regular_font = StrAttribute("regular-font", REGULAR_FONT, "Font(s) for regular text")
    mono_font = StrAttribute("mono-font", MONO_FONT, "Font(s) for mono-spaced text")
    font_size = EnumAttribute(
        "font-size", FontSize, FontSize.DEFAULT, "Relative font size for the document"
    )

    # ---- navigation bar ----
    show_method_in_nav_bar = StrAttribute(
        "show-method-in-nav-bar",
        "false",
        "false | as-plain-text | as-colored-text | as-colored-block",
    )
    use_path_in_nav_bar = BoolAttribute(
        "use-path-in-nav-bar", False, "Show API paths instead of summaries in the nav bar"
    )
    nav_bg_color = StrAttribute("nav-bg-color", None, "Navigation bar background color")
    nav_text_color = StrAttribute("nav-text-color", None, "Navigation bar text color")
    nav_hover_bg_color = StrAttribute(
        "nav-hover-bg-color", None, "Background of a navigation item on mouse-over"
    )
    nav_hover_text_color = StrAttribute(
        "nav-hover-text-color", None, "Text color of a navigation item on mouse-over"
    )
    nav_accent_color = StrAttribute(
        "nav-accent-color", None, "Accent color of the navigation bar (active item background)"
    )
    nav_accent_text_color = StrAttribute(
        "nav-accent-text-color", None, "Text color of selected navigation items"
    )
    nav_active_item_marker = StrAttribute(
        "nav-active-item-marker", "left-bar", "Active navigation item indicator style"
    )
    nav_item_spacing = EnumAttribute(
        "nav-item-spacing", NavItemSpacing, NavItemSpacing.DEFAULT, "Navigation item spacing"
    )
    on_nav_tag_click = StrAttribute(
        "on-nav-tag-click",
        "expand-collapse",
        "expand-collapse | show-description (focused render style only)",
    )

    # ---- layout ----
    layout = EnumAttribute(
        "layout", Layout, Layout.ROW, "Placement of request and response sections"
    )
    render_style = EnumAttribute(
        "render-style", RenderStyle, RenderStyle.READ, "Overall display mode of the document"
    )
    response_area_height = StrAttribute(
        "response-area-height", "300px", "CSS height of the response text area"
    )

    # ---- sections ----
    show_info = BoolAttribute("show-info", True, "Show the document info section")
    info_description_headings_in_navbar = BoolAttribute(
        "info-description-headings-in-navbar",
        False,
        "Add h1/h2 headings of info.description to the navigation bar (read mode)",
    )
    show_components = BoolAttribute(
        "show-components", False, "Show the components section (focused render style)"
    )
    show_header = BoolAttribute("show-header", True, "Show the header")

    # ---- features ----
    allow_authentication = BoolAttribute(
        "allow-authentication", True, "Show the authentication section"
    )
    allow_spec_url_load = BoolAttribute(
        "allow-spec-url-load", False, "Allow loading a spec URL from the UI"
    )
    allow_spec_file_load = BoolAttribute(
        "allow-spec-file-load", False, "Allow loading a spec file from the local drive"
    )
    allow_spec_file_download = BoolAttribute(
        "allow-spec-file-download", True, "Offer buttons to download or open the spec"
    )
    allow_search = BoolAttribute("allow-search", True, "Quick filtering of operations")
    allow_advanced_search = BoolAttribute(
        "allow-advanced-search", True, "Search paths, descriptions, parameters and responses"
    )
    allow_try = BoolAttribute("allow-try", True, "Enable the TRY feature")
    show_curl_before_try = BoolAttribute(
        "show-curl-before-try", False, "Show the cURL snippet before clicking TRY"
    )
    allow_server_selection = BoolAttribute(
        "allow-server-selection", False, "Let the user choose the API server"
    )
    allow_schema_description_expand_toggle = BoolAttribute(
        "allow-schema-description-expand-toggle",
        True,
        "Allow expanding and collapsing field descriptions in schemas",
    )

    # ---- schemas ----
    schema_style = EnumAttribute(
        "schema-style", SchemaStyle, SchemaStyle.TREE, "Display style of object schemas"
    )
    schema_expand_level = StrAttribute(
        "schema-expand-level", "999", "Number of schema levels expanded by default"
    )
    schema_description_expanded = BoolAttribute(
        "schema-description-expanded", False, "Fully expand field descriptions"
    )
    schema_hide_read_only = EnumAttribute(
        "schema-hide-read-only",
        SchemaHideReadOnly,
        SchemaHideReadOnly.DEFAULT,
        "When to hide read-only schema fields",
    )
    schema_hide_write_only = EnumAttribute(
        "schema-hide-write-only",
        SchemaHideWriteOnly,
        SchemaHideWriteOnly.DEFAULT,
        "When to hide write-only schema fields",
    )
    default_schema_tab = EnumAttribute(
        "default-schema-tab", DefaultSchemaTab, DefaultSchemaTab.MODEL, "Initially active schema tab"
    )

    # ---- try-it requests ----
    server_url = StrAttribute("server-url", None, "API server not listed in the spec")
    default_api_server = StrAttribute(
        "default-api-server", None, "Server selected by default when the spec lists several"
    )
    api_key_name = StrAttribute("api-key-name", None, "Name of the API key sent with requests")
    api_key_location = StrAttribute("api-key-location", None, "header | query")
    api_key_value = StrAttribute(
        "api-key-value", None, "Value of the API key; '-' to let the user fill it in"
    )
    fetch_credentials = StrAttribute(
        "fetch-credentials", None, "omit | same-origin | include"
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.additional_settings: dict[str, Any] = {}
        self.document_title = DEFAULT_DOCUMENT_TITLE
        self.custom_head_content = ""
        self.script_url = RAPIDOC_SCRIPT_URL

        self.update_route = True
        self.sort_tags = False
        self.sort_endpoints_by = SortEndpointsBy.PATH
        self.fill_request_fields_with_example = True
        self.persist_auth = False
        self.theme = Theme.DARK
        self.regular_font = REGULAR_FONT
        self.mono_font = MONO_FONT
        self.font_size = FontSize.DEFAULT
        self.show_method_in_nav_bar = "false"
        self.use_path_in_nav_bar = False
        self.nav_active_item_marker = "left-bar"
        self.nav_item_spacing = NavItemSpacing.DEFAULT
        self.on_nav_tag_click = "expand-collapse"
        self.layout = Layout.ROW
        self.render_style = RenderStyle.READ
        self.response_area_height = "300px"
        self.show_info = True
        self.info_description_headings_in_navbar = False
        self.show_components = False
        self.show_header = True
        self.allow_authentication = True
        self.allow_spec_url_load = False
        self.allow_spec_file_load = False
        self.allow_spec_file_download = True
        self.allow_search = True
        self.allow_advanced_search = True
        self.allow_try = True
        self.show_curl_before_try = False
        self.allow_server_selection = False
        self.allow_schema_description_expand_toggle = True
        self.schema_style = SchemaStyle.TREE
        self.schema_expand_level = "999"
        self.schema_description_expanded = False
        self.schema_hide_read_only = SchemaHideReadOnly.DEFAULT
        self.schema_hide_write_only = SchemaHideWriteOnly.DEFAULT
        self.default_schema_tab = DefaultSchemaTab.MODEL

    @classmethod
    def attributes(cls) -> dict[str, Attribute[Any]]:
        """All typed attributes, keyed by property name, in declaration order."""
        found: dict[str, Attribute[Any]] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Attribute):
                    found[name] = value
        return found

    @classmethod
    def find_attribute(cls, name: str) -> Attribute[Any] | None:
        """Look up an attribute by property name or by RapiDoc key.

        ``sort_endpoints_by`` and ``sort-endpoints-by`` resolve to the same
        descriptor.
        """
        attributes = cls.attributes()
        if name in attributes:
            return attributes[name]
        for attribute in attributes.values():
            if attribute.key == name:
                return attribute
        return None

    def check_attributes(self) -> None:
        """Read every enumerated attribute so invalid stored values fail early.

        Raises:
            EnumParseError: If an enum attribute holds an unknown member name
        """
        for name, attribute in self.attributes().items():
            if isinstance(attribute, EnumAttribute):
                getattr(self, name)

    def serialize_attributes(self) -> str:
        """Serialize the attribute map as compact JSON.

        ``</`` is written as ``<\\/`` so values cannot close the inline script
        the JSON is embedded in.
        """
        data = json.dumps(self.additional_settings, separators=(",", ":"))
        return data.replace("</", "<\\/")

    def transform_html(self, html: str, request: RequestContext) -> str:
        """Substitute the settings into the RapiDoc page template.

        Tokens are replaced in a single pass over the template, so token text
        inside substituted values is left as is. No HTML escaping is applied;
        custom head content and styles are inserted as given.

        Args:
            html: Raw template containing the tokens in ``TEMPLATE_TOKENS``
            request: Context of the request being rendered

        Returns:
            The final HTML document

        Raises:
            EnumParseError: If an enum attribute holds an unknown member name
        """
        self.check_attributes()
        values = {
            "{AdditionalAttributes}": self.serialize_attributes(),
            "{CustomStyle}": self.get_custom_style_html(request),
            "{CustomScript}": self.get_custom_script_html(request),
            "{DocumentTitle}": self.document_title,
            "{CustomHeadContent}": self.custom_head_content,
            "{Url}": self.get_document_url(request),
            "{ScriptUrl}": self.resolve_url(self.script_url, request),
        }
        return _TOKEN_PATTERN.sub(lambda m: values[m.group(0)], html)
