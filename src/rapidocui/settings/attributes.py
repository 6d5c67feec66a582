"""Typed views over entries of a settings object's attribute map.

Each descriptor binds one Python property to one RapiDoc attribute key.
Reads fall back to a fixed default when the key is absent; writes always go
back into ``instance.additional_settings`` under the same key.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Optional, TypeVar, overload

from rapidocui.errors import EnumParseError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class Attribute(Generic[T]):
    """Base descriptor storing raw values under a fixed attribute key."""

    name: str

    def __init__(self, key: str, default: Optional[T] = None, doc: str = "") -> None:
        self.key = key
        self.default = default
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> Attribute[T]: ...

    @overload
    def __get__(self, instance: object, owner: type | None = None) -> Optional[T]: ...

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        settings: dict[str, Any] = instance.additional_settings  # type: ignore[attr-defined]
        if self.key not in settings:
            return self.default
        return self.parse(settings[self.key])

    def __set__(self, instance: object, value: Optional[T]) -> None:
        instance.additional_settings[self.key] = self.serialize(value)  # type: ignore[attr-defined]

    def parse(self, raw: Any) -> Optional[T]:
        """Convert a stored value to the property type."""
        return raw

    def serialize(self, value: Any) -> Any:
        """Convert a property value to its stored form."""
        return value

    def coerce(self, value: Any) -> Any:
        """Validate a value coming from a config file.

        Raises:
            ValueError: If the value cannot be stored under this attribute
        """
        return value

    @property
    def default_repr(self) -> str:
        """Default value as it would appear in the serialized attribute map."""
        return "null" if self.default is None else str(self.serialize(self.default))


class BoolAttribute(Attribute[bool]):
    """Boolean attribute, stored as a JSON boolean."""

    def coerce(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise ValueError(f"'{self.key}' expects true or false, got {value!r}")
        return value

    @property
    def default_repr(self) -> str:
        if self.default is None:
            return "null"
        return "true" if self.default else "false"


class StrAttribute(Attribute[str]):
    """Free-form string attribute.

    Documented allowed values (e.g. ``omit|same-origin|include``) are not
    checked here; the browser component validates them.
    """

    def coerce(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)


class EnumAttribute(Attribute[E]):
    """Enumerated attribute, stored as the lower-cased member name."""

    def __init__(
        self, key: str, enum_type: type[E], default: E, doc: str = ""
    ) -> None:
        super().__init__(key, default, doc)
        self.enum_type = enum_type

    def parse(self, raw: Any) -> E:
        """Parse a stored value case-insensitively against member names.

        Raises:
            EnumParseError: If ``raw`` names no member of the enumeration
        """
        if isinstance(raw, self.enum_type):
            return raw
        if isinstance(raw, str):
            wanted = raw.lower()
            for member in self.enum_type:
                if member.name.lower() == wanted:
                    return member
        raise EnumParseError(self.key, raw, self.enum_type)

    def serialize(self, value: Any) -> str:
        return self.parse(value).name.lower()

    def coerce(self, value: Any) -> E:
        return self.parse(value)
