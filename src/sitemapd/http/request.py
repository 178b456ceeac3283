"""Immutable HTTP request.

Frozen metadata only. The sitemap route never reads a request body.
"""

from __future__ import annotations

from dataclasses import dataclass

from sitemapd._internal.asgi import HTTPScope, Scope


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request."""

    method: str
    path: str
    client: tuple[str, int] | None = None

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        parsed = HTTPScope.from_scope(scope)
        return cls(method=parsed.method, path=parsed.path, client=parsed.client)
