# src/rapidocui/protocols.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class RequestContext(Protocol):
    """Protocol describing what rendering needs from an inbound request.

    The settings core never sees a concrete framework request. Hosting
    adapters wrap their request type in an object exposing the base path
    the application is mounted under, which is used to resolve relative
    asset and document links.
    """

    @property
    def base_path(self) -> str:
        """Path prefix the application is served under ("" at the root)."""
        ...


@dataclass(frozen=True)
class StaticRequestContext:
    """Request context with a fixed base path.

    Used when rendering outside a live request, e.g. from the CLI.
    """

    base_path: str = ""
