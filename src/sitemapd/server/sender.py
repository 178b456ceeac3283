"""ASGI response sending — translates sitemapd Responses to ASGI messages."""

from typing import Any

from sitemapd._internal.asgi import Send
from sitemapd.http.response import Response

Message = dict[str, Any]


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def build_messages(response: Response, *, head: bool = False) -> tuple[Message, Message]:
    """Encode a Response into its ``http.response.start`` and body messages.

    Raises ``TypeError`` if *response* is not a Response and
    ``UnicodeEncodeError`` if a header cannot be encoded as latin-1.
    Nothing has been sent when either is raised.
    """
    if not isinstance(response, Response):
        msg = f"Expected a Response, got {type(response).__name__}"
        raise TypeError(msg)

    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    body = response.body_bytes if _body_allowed(response.status) else b""

    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    start = {
        "type": "http.response.start",
        "status": response.status,
        "headers": raw_headers,
    }
    return start, {"type": "http.response.body", "body": b"" if head else body}


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Translate a Response into ASGI send() calls.

    For ``HEAD`` requests the body is dropped but ``content-length``
    still reports what a ``GET`` would have sent.
    """
    start, body = build_messages(response, head=head)
    await send(start)
    await send(body)
