"""sitemapd — serve one XML sitemap at one configurable URL.

Every other path is answered by a pluggable not-found strategy.

Basic usage::

    from sitemapd import RedirectToRoot, SitemapApp, SitemapBuilder

    sitemap = (
        SitemapBuilder()
        .static_file("./sitemaps.xml")
        .web_directory(".well-known")
        .not_found_strategy(RedirectToRoot())
        .build()
    )
    SitemapApp(sitemap).run()
"""

__version__ = "0.1.0"
__all__ = [
    "AppConfig",
    "ConfigurationError",
    "FileUnavailable",
    "HTTPError",
    "MethodNotAllowed",
    "NotFoundStrategy",
    "RedirectToRoot",
    "Request",
    "Response",
    "ShowErrorMessage",
    "SitemapApp",
    "SitemapBuilder",
    "SitemapConfig",
    "SitemapError",
    "VirtualPath",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import sitemapd`` fast while providing a clean top-level API.
    """
    if name == "SitemapApp":
        from sitemapd.app import SitemapApp

        return SitemapApp

    if name == "AppConfig":
        from sitemapd.config import AppConfig

        return AppConfig

    if name in ("SitemapBuilder", "SitemapConfig"):
        from sitemapd import sitemap as _sitemap

        return getattr(_sitemap, name)

    if name in ("NotFoundStrategy", "RedirectToRoot", "ShowErrorMessage"):
        from sitemapd import strategies as _strategies

        return getattr(_strategies, name)

    if name == "VirtualPath":
        from sitemapd.routing import VirtualPath

        return VirtualPath

    if name == "Request":
        from sitemapd.http.request import Request

        return Request

    if name == "Response":
        from sitemapd.http.response import Response

        return Response

    if name in (
        "ConfigurationError",
        "FileUnavailable",
        "HTTPError",
        "MethodNotAllowed",
        "SitemapError",
    ):
        from sitemapd import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
