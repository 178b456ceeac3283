"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with a typed
dataclass for internal use. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Raw ASGI 3.0 types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Typed HTTP scope parsed from raw ASGI scope dict."""

    method: str
    path: str
    client: tuple[str, int] | None

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object.

        ``path`` is already percent-decoded by the server and carries no
        query string, so it is compared as-is.
        """
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            client=tuple(client) if client else None,
        )
