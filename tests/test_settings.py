import pytest

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
from rapidocui.errors import EnumParseError
from rapidocui.settings.attributes import BoolAttribute, EnumAttribute, StrAttribute
from rapidocui.settings.rapidoc import MONO_FONT, REGULAR_FONT, RapiDocSettings

ENUM_PROPERTIES = [
    ("sort_endpoints_by", SortEndpointsBy),
    ("theme", Theme),
    ("font_size", FontSize),
    ("nav_item_spacing", NavItemSpacing),
    ("layout", Layout),
    ("render_style", RenderStyle),
    ("schema_style", SchemaStyle),
    ("schema_hide_read_only", SchemaHideReadOnly),
    ("schema_hide_write_only", SchemaHideWriteOnly),
    ("default_schema_tab", DefaultSchemaTab),
]

DOCUMENTED_DEFAULTS = {
    "update_route": True,
    "route_prefix": None,
    "sort_tags": False,
    "sort_endpoints_by": SortEndpointsBy.PATH,
    "heading_text": None,
    "goto_path": None,
    "fill_request_fields_with_example": True,
    "persist_auth": False,
    "theme": Theme.DARK,
    "bg_color": None,
    "text_color": None,
    "header_color": None,
    "primary_color": None,
    "load_fonts": True,
    "regular_font": REGULAR_FONT,
    "mono_font": MONO_FONT,
    "font_size": FontSize.DEFAULT,
    "show_method_in_nav_bar": "false",
    "use_path_in_nav_bar": False,
    "nav_bg_color": None,
    "nav_text_color": None,
    "nav_hover_bg_color": None,
    "nav_hover_text_color": None,
    "nav_accent_color": None,
    "nav_accent_text_color": None,
    "nav_active_item_marker": "left-bar",
    "nav_item_spacing": NavItemSpacing.DEFAULT,
    "on_nav_tag_click": "expand-collapse",
    "layout": Layout.ROW,
    "render_style": RenderStyle.READ,
    "response_area_height": "300px",
    "show_info": True,
    "info_description_headings_in_navbar": False,
    "show_components": False,
    "show_header": True,
    "allow_authentication": True,
    "allow_spec_url_load": False,
    "allow_spec_file_load": False,
    "allow_spec_file_download": True,
    "allow_search": True,
    "allow_advanced_search": True,
    "allow_try": True,
    "show_curl_before_try": False,
    "allow_server_selection": False,
    "allow_schema_description_expand_toggle": True,
    "schema_style": SchemaStyle.TREE,
    "schema_expand_level": "999",
    "schema_description_expanded": False,
    "schema_hide_read_only": SchemaHideReadOnly.DEFAULT,
    "schema_hide_write_only": SchemaHideWriteOnly.DEFAULT,
    "default_schema_tab": DefaultSchemaTab.MODEL,
    "server_url": None,
    "default_api_server": None,
    "api_key_name": None,
    "api_key_location": None,
    "api_key_value": None,
    "fetch_credentials": None,
}


def test_every_attribute_has_a_documented_default() -> None:
    assert set(RapiDocSettings.attributes()) == set(DOCUMENTED_DEFAULTS)


@pytest.mark.parametrize("name", sorted(DOCUMENTED_DEFAULTS))
def test_constructed_settings_return_documented_defaults(name: str) -> None:
    assert getattr(RapiDocSettings(), name) == DOCUMENTED_DEFAULTS[name]


@pytest.mark.parametrize("name", sorted(DOCUMENTED_DEFAULTS))
def test_absent_keys_fall_back_to_documented_defaults(name: str) -> None:
    settings = RapiDocSettings()
    settings.additional_settings.clear()
    assert getattr(settings, name) == DOCUMENTED_DEFAULTS[name]


def test_constructor_populates_defaults_in_order() -> None:
    settings = RapiDocSettings()
    keys = list(settings.additional_settings)
    assert keys[:3] == ["update-route", "sort-tags", "sort-endpoints-by"]
    assert keys[-1] == "default-schema-tab"
    assert "route-prefix" not in settings.additional_settings
    assert "load-fonts" not in settings.additional_settings


@pytest.mark.parametrize("name,enum_type", ENUM_PROPERTIES)
def test_enum_round_trip_stores_lower_case_name(name: str, enum_type: type) -> None:
    settings = RapiDocSettings()
    attribute = RapiDocSettings.attributes()[name]
    for member in enum_type:
        setattr(settings, name, member)
        assert getattr(settings, name) is member
        assert settings.additional_settings[attribute.key] == member.name.lower()


def test_enum_setter_accepts_member_names() -> None:
    settings = RapiDocSettings()
    settings.render_style = "FOCUSED"  # type: ignore[assignment]
    assert settings.render_style is RenderStyle.FOCUSED
    assert settings.additional_settings["render-style"] == "focused"


def test_enum_read_is_case_insensitive() -> None:
    settings = RapiDocSettings()
    settings.additional_settings["layout"] = "Column"
    assert settings.layout is Layout.COLUMN


def test_invalid_stored_enum_raises() -> None:
    settings = RapiDocSettings()
    settings.additional_settings["sort-endpoints-by"] = "bogus"
    with pytest.raises(EnumParseError) as exc_info:
        _ = settings.sort_endpoints_by
    err = exc_info.value
    assert err.key == "sort-endpoints-by"
    assert err.value == "bogus"
    assert err.enum_type is SortEndpointsBy
    assert err.allowed_values == ["path", "method", "summary", "none"]
    assert "bogus" in str(err)


def test_invalid_enum_assignment_raises() -> None:
    settings = RapiDocSettings()
    with pytest.raises(EnumParseError):
        settings.theme = "purple"  # type: ignore[assignment]
    assert settings.additional_settings["theme"] == "dark"


def test_strings_are_stored_verbatim() -> None:
    settings = RapiDocSettings()
    settings.fetch_credentials = "not-a-real-mode"
    settings.show_method_in_nav_bar = "as-colored-block"
    assert settings.additional_settings["fetch-credentials"] == "not-a-real-mode"
    assert settings.show_method_in_nav_bar == "as-colored-block"


def test_booleans_are_stored_as_booleans() -> None:
    settings = RapiDocSettings()
    settings.allow_try = False
    assert settings.additional_settings["allow-try"] is False
    assert settings.allow_try is False


def test_each_property_owns_its_key() -> None:
    settings = RapiDocSettings()
    settings.regular_font = "Inter"
    settings.mono_font = "Fira Code"
    settings.show_method_in_nav_bar = "as-plain-text"
    settings.nav_hover_text_color = "#ffffff"
    settings.api_key_name = "X-Api-Key"
    settings.api_key_value = "-"

    assert settings.regular_font == "Inter"
    assert settings.mono_font == "Fira Code"
    assert settings.show_method_in_nav_bar == "as-plain-text"
    assert settings.nav_hover_text_color == "#ffffff"
    assert settings.api_key_name == "X-Api-Key"
    assert settings.api_key_value == "-"
    assert settings.additional_settings["api-key-value"] == "-"


def test_attribute_keys_are_unique() -> None:
    keys = [attribute.key for attribute in RapiDocSettings.attributes().values()]
    assert len(keys) == len(set(keys))


def test_find_attribute_by_name_or_key() -> None:
    by_name = RapiDocSettings.find_attribute("sort_endpoints_by")
    by_key = RapiDocSettings.find_attribute("sort-endpoints-by")
    assert by_name is by_key
    assert isinstance(by_name, EnumAttribute)
    assert RapiDocSettings.find_attribute("does-not-exist") is None


def test_attribute_kinds() -> None:
    attributes = RapiDocSettings.attributes()
    assert isinstance(attributes["persist_auth"], BoolAttribute)
    assert isinstance(attributes["heading_text"], StrAttribute)
    assert isinstance(attributes["theme"], EnumAttribute)


def test_default_repr() -> None:
    attributes = RapiDocSettings.attributes()
    assert attributes["update_route"].default_repr == "true"
    assert attributes["sort_endpoints_by"].default_repr == "path"
    assert attributes["heading_text"].default_repr == "null"
    assert attributes["response_area_height"].default_repr == "300px"


def test_string_coercion_from_config_values() -> None:
    attributes = RapiDocSettings.attributes()
    assert attributes["schema_expand_level"].coerce(2) == "2"
    assert attributes["show_method_in_nav_bar"].coerce(False) == "false"
    with pytest.raises(ValueError):
        attributes["allow_try"].coerce("yes")
