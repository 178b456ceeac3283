"""Server runtime — hands the ASGI app to pounce.

Pounce owns sockets, workers, and signal handling. sitemapd only
supplies the app object and the bind settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitemapd.app import SitemapApp


def run_server(
    app: SitemapApp,
    host: str,
    port: int,
    *,
    workers: int = 1,
    log_level: str = "info",
    log_format: str = "text",
    reload: bool = False,
) -> None:
    """Start a pounce server with the given sitemapd app.

    Pounce's ``run()`` takes an import string, but the app here is a live
    object built from CLI flags, so ``pounce.Server`` is used directly
    with the ASGI callable.

    Args:
        app: ASGI callable (SitemapApp instance).
        host: Bind host address.
        port: Bind port number.
        workers: Worker count (0 = auto-detect from CPU count).
        log_level: Server log level (``"debug"``, ``"info"``, ...).
        log_format: ``"text"`` or ``"json"`` access/lifecycle logs.
        reload: Restart on source changes (development only).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        reload=reload,
        log_level=log_level,
        log_format=log_format,
    )
    server = Server(config, app)
    server.run()
