"""The sitemapd application — an ASGI callable serving one sitemap."""

import logging

from sitemapd._internal.asgi import Receive, Scope, Send
from sitemapd.config import AppConfig
from sitemapd.errors import ConfigurationError
from sitemapd.server.handler import handle_request
from sitemapd.sitemap import SitemapBuilder, SitemapConfig

logger = logging.getLogger("sitemapd.app")


class SitemapApp:
    """ASGI application serving a single sitemap file.

    Both configs are frozen and fixed at construction, so one instance
    is shared by every request on every worker without locking::

        app = SitemapApp(SitemapBuilder().web_directory(".well-known").build())
        app.run()
    """

    __slots__ = ("config", "sitemap")

    def __init__(
        self,
        sitemap: SitemapConfig | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.sitemap: SitemapConfig = sitemap or SitemapBuilder().build()
        self.config: AppConfig = config or AppConfig()

    def check(self) -> None:
        """Validate the sitemap eagerly. Raises ``ConfigurationError``."""
        self.sitemap.validate()

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Bind and serve until the server runtime is stopped.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        from sitemapd.server.runtime import run_server

        run_server(
            self,
            host or self.config.host,
            port if port is not None else self.config.port,
            workers=self.config.workers,
            log_level=self.config.log_level,
            log_format=self.config.log_format,
            reload=self.config.debug,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            sitemap=self.sitemap,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Startup optionally validates the sitemap file so a bad path stops
        the server before it accepts traffic.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                if self.config.validate_on_startup:
                    try:
                        self.check()
                    except ConfigurationError as exc:
                        logger.error("Startup check failed: %s", exc)
                        await send({"type": "lifespan.startup.failed", "message": str(exc)})
                        return
                logger.info(
                    "Serving %s at %s",
                    self.sitemap.static_file,
                    self.sitemap.virtual_path.url,
                )
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
