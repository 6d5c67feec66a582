"""Shared enumerations."""

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

__all__ = [
    "DefaultSchemaTab",
    "FontSize",
    "Layout",
    "NavItemSpacing",
    "RenderStyle",
    "SchemaHideReadOnly",
    "SchemaHideWriteOnly",
    "SchemaStyle",
    "SortEndpointsBy",
    "Theme",
]
