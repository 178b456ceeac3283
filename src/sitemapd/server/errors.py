"""Error handling pipeline for sitemapd requests.

Maps HTTPError exceptions and serve-time failures to plain-text
Responses. A sitemap file that cannot be read becomes a 500 response
for that request only; the server keeps running.
"""

import logging

from sitemapd.errors import FileUnavailable, HTTPError
from sitemapd.http.request import Request
from sitemapd.http.response import Response

logger = logging.getLogger("sitemapd.server")


def _peer(request: Request) -> str:
    if request.client is None:
        return "unknown client"
    host, port = request.client
    return f"{host}:{port}"


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response carrying its status and headers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    resp = Response(body=exc.detail or f"Error {exc.status}", status=exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Handle serve-time failures and unexpected exceptions as 500 errors."""
    if isinstance(exc, FileUnavailable):
        # Operational misconfiguration, not a code bug: no traceback.
        logger.error(
            "500 %s %s from %s: sitemap file %s unavailable: %s",
            request.method,
            request.path,
            _peer(request),
            exc.path,
            exc.reason,
        )
    else:
        logger.exception("500 %s %s", request.method, request.path)

    if debug:
        return Response(body=f"500 Internal Server Error: {exc}", status=500)
    return Response(body="Internal Server Error", status=500)
