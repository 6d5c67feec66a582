"""Settings for the RapiDoc page.

This package provides:
- RapiDocSettings: typed properties over the RapiDoc attribute map
- UiSettingsBase: routes and custom assets shared by documentation UIs
- UserSettings: user configuration loaded from config.yaml
"""

from rapidocui.settings.base import UiSettingsBase
from rapidocui.settings.rapidoc import RapiDocSettings
from rapidocui.settings.user import UserSettings

__all__ = ["RapiDocSettings", "UiSettingsBase", "UserSettings"]
