"""Not-found strategies.

A strategy decides the response for every request that does not hit the
configured virtual path. Any object with a ``handle_not_found()`` method
returning a ``Response`` qualifies::

    class Gone:
        def handle_not_found(self) -> Response:
            return Response("gone", status=410)

    SitemapBuilder().not_found_strategy(Gone()).build()

Strategies are called with no arguments and must not depend on the
failing request. They are shared, unsynchronized, across every request.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from sitemapd.errors import ConfigurationError
from sitemapd.http.response import Response


@runtime_checkable
class NotFoundStrategy(Protocol):
    """Produces the response for a request that missed the sitemap."""

    def handle_not_found(self) -> Response: ...


@dataclass(frozen=True, slots=True)
class RedirectToRoot:
    """308 Permanent Redirect to ``/``."""

    def handle_not_found(self) -> Response:
        return Response(status=308).with_header("Location", "/")


@dataclass(frozen=True, slots=True)
class ShowErrorMessage:
    """404 with a plain-text ``404 Not Found`` body."""

    def handle_not_found(self) -> Response:
        return Response(body="404 Not Found", status=404)


# CLI names for the built-ins. Resolved once, at startup.
BUILTIN_STRATEGIES: dict[str, type[NotFoundStrategy]] = {
    "error": ShowErrorMessage,
    "redirect": RedirectToRoot,
}


def strategy_from_name(name: str) -> NotFoundStrategy:
    """Instantiate a built-in strategy by its CLI name.

    Raises ``ConfigurationError`` for unknown names.
    """
    try:
        factory = BUILTIN_STRATEGIES[name]
    except KeyError:
        choices = ", ".join(sorted(BUILTIN_STRATEGIES))
        msg = f"Unknown not-found strategy {name!r}. Choose one of: {choices}"
        raise ConfigurationError(msg) from None
    return factory()
