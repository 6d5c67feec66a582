"""Exception classes for RapiDoc settings and rendering.

This module defines the small hierarchy of errors raised while reading
typed settings or rendering the RapiDoc document.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class RapiDocError(Exception):
    """Base class for errors raised by rapidocui.

    Hosting adapters catch this type and turn it into an HTTP 500 response.
    """


class EnumParseError(RapiDocError, ValueError):
    """Raised when a stored attribute does not name a member of its enumeration.

    A stored value that cannot be parsed means something upstream wrote an
    invalid string into the attribute map. The render that hits it fails
    instead of silently falling back to the default.
    """

    def __init__(self, key: str, value: Any, enum_type: type[Enum]) -> None:
        """Initialize the exception.

        Args:
            key: Attribute key being read (e.g. ``sort-endpoints-by``)
            value: The raw value found in the attribute map
            enum_type: Enumeration the value was parsed against
        """
        allowed = ", ".join(member.name.lower() for member in enum_type)
        super().__init__(
            f"Invalid value {value!r} for '{key}': expected one of {allowed}"
        )
        self.key: str = key
        self.value: Any = value
        self.enum_type: type[Enum] = enum_type

    @property
    def allowed_values(self) -> list[str]:
        """Lower-cased member names accepted for this attribute."""
        return [member.name.lower() for member in self.enum_type]
