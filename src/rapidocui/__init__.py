"""RapiDoc settings binding for Python web applications."""

from rapidocui.errors import EnumParseError, RapiDocError
from rapidocui.protocols import RequestContext, StaticRequestContext
from rapidocui.render import ErrorRenderer, TemplateRenderer
from rapidocui.settings import RapiDocSettings, UiSettingsBase, UserSettings

__version__ = "0.1.0"

__all__ = [
    "EnumParseError",
    "ErrorRenderer",
    "RapiDocError",
    "RapiDocSettings",
    "RequestContext",
    "StaticRequestContext",
    "TemplateRenderer",
    "UiSettingsBase",
    "UserSettings",
]
