"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, ClassVar, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from rapidocui.settings.attributes import EnumAttribute
from rapidocui.settings.base import (
    DEFAULT_DOCUMENT_NAME,
    DEFAULT_DOCUMENT_PATH,
    DEFAULT_UI_PATH,
)
from rapidocui.settings.rapidoc import (
    DEFAULT_DOCUMENT_TITLE,
    RAPIDOC_SCRIPT_URL,
    RapiDocSettings,
)

# Load environment variables from .env file(s)
load_dotenv()

AttributeValue = Union[bool, int, str, None]


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """User settings for serving the RapiDoc page.

    Route and document settings are plain fields. RapiDoc attributes go
    under ``attributes``, keyed by property name (``sort_endpoints_by``) or
    by RapiDoc key (``sort-endpoints-by``). Values left out keep the
    RapiDocSettings defaults.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/rapidocui/config.yaml").expanduser(),
        Path("/etc/rapidocui/config.yaml"),
    ]

    # Routes
    path: str = Field(DEFAULT_UI_PATH, description="Route the RapiDoc page is served under")
    document_path: str = Field(
        DEFAULT_DOCUMENT_PATH,
        description="Route of the OpenAPI document; {documentName} is substituted",
    )
    document_name: str = Field(DEFAULT_DOCUMENT_NAME, min_length=1, description="Document name")

    # Page content
    document_title: str = Field(DEFAULT_DOCUMENT_TITLE, description="Title of the HTML page")
    custom_head_content: str = Field("", description="Markup appended to <head>")
    custom_stylesheet_path: str | None = Field(None, description="Extra stylesheet URL")
    custom_javascript_path: str | None = Field(None, description="Extra script URL")
    custom_inline_styles: str | None = Field(None, description="CSS placed in a <style> tag")
    script_url: str = Field(RAPIDOC_SCRIPT_URL, description="URL of the RapiDoc bundle")

    attributes: dict[str, AttributeValue] = Field(
        default_factory=dict, description="RapiDoc attribute overrides"
    )

    # ---- validators ----
    @field_validator("path", "document_path")
    @classmethod
    def validate_route(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"route must start with '/': {v!r}")
        return v

    @field_validator("attributes")
    @classmethod
    def validate_attributes(cls, v: dict[str, AttributeValue]) -> dict[str, AttributeValue]:
        """Reject unknown attribute names and values the attribute cannot hold.

        Null clears string and boolean attributes; enumerated attributes always
        need a member name.
        """
        for name, value in v.items():
            attribute = RapiDocSettings.find_attribute(name)
            if attribute is None:
                raise ValueError(f"unknown RapiDoc attribute: {name!r}")
            if value is None:
                if isinstance(attribute, EnumAttribute):
                    raise ValueError(f"'{attribute.key}' cannot be null")
                continue
            attribute.coerce(value)
        return v

    # ---- convenience methods ----
    def build_rapidoc_settings(self) -> RapiDocSettings:
        """Create a RapiDocSettings object from this configuration.

        Returns:
            Settings ready to be passed to a hosting adapter
        """
        settings = RapiDocSettings(
            path=self.path,
            document_path=self.document_path,
            document_name=self.document_name,
        )
        settings.document_title = self.document_title
        settings.custom_head_content = self.custom_head_content
        settings.custom_stylesheet_path = self.custom_stylesheet_path
        settings.custom_javascript_path = self.custom_javascript_path
        settings.custom_inline_styles = self.custom_inline_styles
        settings.script_url = self.script_url

        for name, value in self.attributes.items():
            attribute = RapiDocSettings.find_attribute(name)
            assert attribute is not None  # checked by validate_attributes
            coerced: Any = None if value is None else attribute.coerce(value)
            setattr(settings, attribute.name, coerced)
        return settings

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("RAPIDOCUI_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from RAPIDOCUI_CONFIG not found: {path}")
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set RAPIDOCUI_CONFIG."
                    )

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
