"""sitemapd exception hierarchy.

Shared across the builder, the request pipeline, and the CLI so every
module raises and catches the same types.
"""

from dataclasses import dataclass
from pathlib import Path


class SitemapError(Exception):
    """Base for all sitemapd-specific errors."""


class ConfigurationError(SitemapError):
    """Raised when the sitemap or server configuration is invalid.

    Only raised eagerly by ``SitemapConfig.validate()`` and the CLI;
    ``SitemapBuilder.build()`` never touches the filesystem.
    """


class FileUnavailable(SitemapError):  # noqa: N818
    """The physical sitemap file could not be read at serve time.

    Converted into a 500 response by the request pipeline.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Can't read sitemap file {str(self.path)!r}: {reason}")


@dataclass(frozen=True, slots=True)
class HTTPError(SitemapError):
    """An error that maps directly to an HTTP status code."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405: the sitemap route only answers GET and HEAD.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        super().__init__(
            status=405,
            detail=detail or "Method Not Allowed",
            headers=(("Allow", allow_value),),
        )
