"""Virtual path normalization and request path matching.

The sitemap is mounted on a single catch-all route,
``/{requested_path:path}``. Whatever that route captures is compared
against one ``VirtualPath`` that was normalized once, at build time.
"""

from dataclasses import dataclass
from pathlib import PurePosixPath

# The only route the app registers; reported by ``sitemapd check``.
CATCH_ALL_ROUTE = "/{requested_path:path}"


@dataclass(frozen=True, slots=True)
class VirtualPath:
    """The URL path (relative, no leading slash) the sitemap is served at.

    Built from a directory and a filename::

        VirtualPath.from_segments(".well-known", "sitemaps.xml")
        # -> VirtualPath(parts=(".well-known", "sitemaps.xml"))
    """

    parts: tuple[str, ...]

    @classmethod
    def from_segments(cls, directory: str, filename: str) -> "VirtualPath":
        """Normalize a directory/filename pair into one virtual path.

        POSIX semantics: empty and ``.`` segments vanish, so ``""``,
        ``"."`` and ``"./"`` all mean "no directory". A leading slash on
        the directory is ignored since request paths are compared
        without one. ``..`` is kept as a literal segment.
        """
        joined = PurePosixPath(directory.lstrip("/")) / filename.lstrip("/")
        return cls(parts=joined.parts)

    @property
    def url(self) -> str:
        """Absolute URL path clients request, e.g. ``/.well-known/sitemaps.xml``."""
        return "/" + str(self)

    def __str__(self) -> str:
        return "/".join(self.parts)


def extract_requested_path(path: str) -> str:
    """Capture of the catch-all route: the path minus one leading slash.

    *path* is the already percent-decoded ASGI path; the query string is
    never part of it.
    """
    return path[1:] if path.startswith("/") else path


def matches(virtual: VirtualPath, requested: str) -> bool:
    """Exact, case-sensitive segment equality.

    No trailing-slash equivalence and no collapsing of empty or ``.``
    segments on the request side.
    """
    return tuple(requested.split("/")) == virtual.parts
