"""ASGI handler — translates ASGI scope/messages to sitemapd types.

The only component that touches raw ASGI directly. Converts the scope
to a typed Request, dispatches to the sitemap route, and sends the
Response back through ASGI send().
"""

from sitemapd._internal.asgi import Receive, Scope, Send
from sitemapd.errors import HTTPError
from sitemapd.http.request import Request
from sitemapd.serve import serve_sitemap
from sitemapd.server.errors import handle_http_error, handle_internal_error
from sitemapd.server.sender import build_messages
from sitemapd.sitemap import SitemapConfig


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001
    send: Send,
    *,
    sitemap: SitemapConfig,
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline.

    Websocket connections are closed straight away; other non-HTTP
    scopes are ignored.
    """
    if scope["type"] == "websocket":
        await send({"type": "websocket.close", "code": 1000})
        return
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)
    head = request.method == "HEAD"

    try:
        response = await serve_sitemap(request, sitemap)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)

    # Encode before sending: a strategy may hand back a response that
    # cannot go on the wire, and that must still become a 500.
    try:
        start, body = build_messages(response, head=head)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)
        start, body = build_messages(response, head=head)

    await send(start)
    await send(body)
