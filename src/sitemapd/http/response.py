"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

PLAIN_TEXT = "text/plain; charset=utf-8"
XML = "application/xml"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = PLAIN_TEXT
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        new = tuple(headers.items())
        return replace(self, headers=(*self.headers, *new))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    # -- Accessors --

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name* (case-insensitive)."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return default

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body
