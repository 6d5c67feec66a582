"""Closed value sets accepted by RapiDoc attributes.

Members are stored in the attribute map as their lower-cased name, which is
the spelling the RapiDoc web component expects (e.g. ``SortEndpointsBy.METHOD``
becomes ``"method"``).
"""

from enum import Enum


class SortEndpointsBy(Enum):
    """Ordering of endpoints within each tag."""

    PATH = "path"
    METHOD = "method"
    SUMMARY = "summary"
    NONE = "none"


class Theme(Enum):
    """Base theme used to derive the colors of the UI components."""

    DARK = "dark"
    LIGHT = "light"


class FontSize(Enum):
    """Relative font size for the entire document."""

    DEFAULT = "default"
    LARGE = "large"
    LARGEST = "largest"


class NavItemSpacing(Enum):
    DEFAULT = "default"
    COMPACT = "compact"
    RELAXED = "relaxed"


class Layout(Enum):
    """Placement of request/response sections.

    ROW places them side by side, COLUMN one below the other. Only applies
    to the ``view`` render style on wide screens.
    """

    ROW = "row"
    COLUMN = "column"


class RenderStyle(Enum):
    READ = "read"
    VIEW = "view"
    FOCUSED = "focused"


class SchemaStyle(Enum):
    TREE = "tree"
    TABLE = "table"


class SchemaHideReadOnly(Enum):
    DEFAULT = "default"
    NEVER = "never"


class SchemaHideWriteOnly(Enum):
    DEFAULT = "default"
    NEVER = "never"


class DefaultSchemaTab(Enum):
    """Tab that is active when a schema is first shown."""

    MODEL = "model"
    SCHEMA = "schema"
