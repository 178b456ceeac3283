"""Sitemap configuration and its fluent builder.

``SitemapBuilder`` collects overrides; ``build()`` normalizes the
virtual path once and returns a frozen ``SitemapConfig`` that every
request handler shares read-only::

    sitemap = (
        SitemapBuilder()
        .static_file("./sitemaps.xml")
        .web_directory(".well-known")
        .web_filename("sitemaps.xml")
        .not_found_strategy(RedirectToRoot())
        .build()
    )
"""

from dataclasses import dataclass, field, replace
from pathlib import Path

from sitemapd.errors import ConfigurationError
from sitemapd.routing import VirtualPath
from sitemapd.strategies import NotFoundStrategy, ShowErrorMessage


@dataclass(frozen=True, slots=True)
class SitemapConfig:
    """Resolved sitemap settings. Immutable after ``build()``."""

    static_file: Path
    virtual_path: VirtualPath
    not_found_strategy: NotFoundStrategy

    def validate(self) -> None:
        """Check eagerly that the physical file can be served.

        Raises ``ConfigurationError`` if the file is missing, is not a
        regular file, or is not valid UTF-8 text.
        """
        if not self.static_file.is_file():
            msg = f"Sitemap file {str(self.static_file)!r} does not exist or is not a file"
            raise ConfigurationError(msg)
        try:
            self.static_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Sitemap file {str(self.static_file)!r} is not readable: {exc}"
            raise ConfigurationError(msg) from exc


@dataclass(frozen=True, slots=True)
class SitemapBuilder:
    """Fluent builder for ``SitemapConfig``.

    Every setter returns a new builder, so overrides chain in any order
    and a partially configured builder can be reused.
    """

    static_file_path: str = "sitemaps.xml"
    directory: str = ""
    filename: str = "sitemaps.xml"
    strategy: NotFoundStrategy = field(default_factory=ShowErrorMessage)

    def static_file(self, path: str | Path) -> "SitemapBuilder":
        """Physical location of the sitemap on disk."""
        return replace(self, static_file_path=str(path))

    def web_directory(self, directory: str) -> "SitemapBuilder":
        """URL directory the sitemap is served under (may be empty)."""
        return replace(self, directory=directory)

    def web_filename(self, filename: str) -> "SitemapBuilder":
        """URL filename the sitemap is served as."""
        return replace(self, filename=filename)

    def not_found_strategy(self, strategy: NotFoundStrategy) -> "SitemapBuilder":
        """Response policy for every request that misses the sitemap."""
        if isinstance(strategy, type):
            msg = f"Pass a strategy instance, e.g. {strategy.__name__}(), not the class"
            raise ConfigurationError(msg)
        if not isinstance(strategy, NotFoundStrategy):
            msg = (
                f"{type(strategy).__name__} is not a not-found strategy: "
                "it needs a handle_not_found() method"
            )
            raise ConfigurationError(msg)
        return replace(self, strategy=strategy)

    def build(self) -> SitemapConfig:
        """Normalize the virtual path and freeze the configuration.

        No filesystem access happens here; see ``SitemapConfig.validate()``.
        """
        return SitemapConfig(
            static_file=Path(self.static_file_path),
            virtual_path=VirtualPath.from_segments(self.directory, self.filename),
            not_found_strategy=self.strategy,
        )
