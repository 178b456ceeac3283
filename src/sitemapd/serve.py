"""The sitemap route handler.

Resolves one request against the shared ``SitemapConfig``: a match is
answered with the file from disk, anything else with the configured
not-found strategy.
"""

from pathlib import Path

import anyio

from sitemapd.errors import FileUnavailable, MethodNotAllowed
from sitemapd.http.request import Request
from sitemapd.http.response import XML, Response
from sitemapd.routing import extract_requested_path, matches
from sitemapd.sitemap import SitemapConfig

ALLOWED_METHODS = frozenset({"GET", "HEAD"})


async def read_sitemap(path: Path) -> str:
    """Read the whole sitemap file as UTF-8 text.

    Runs in a worker thread via anyio so the event loop keeps serving.
    Raises ``FileUnavailable`` for missing, unreadable, or non-UTF-8 files.
    """
    try:
        return await anyio.Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileUnavailable(path, str(exc)) from exc


async def serve_sitemap(request: Request, sitemap: SitemapConfig) -> Response:
    """Answer one request on the catch-all route.

    The file is re-read on every hit; nothing is cached between requests.
    """
    if request.method not in ALLOWED_METHODS:
        raise MethodNotAllowed(ALLOWED_METHODS)

    requested = extract_requested_path(request.path)
    if not matches(sitemap.virtual_path, requested):
        return sitemap.not_found_strategy.handle_not_found()

    content = await read_sitemap(sitemap.static_file)
    return Response(body=content, content_type=XML)
