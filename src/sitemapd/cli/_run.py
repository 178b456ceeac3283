"""``sitemapd run`` — build the app from flags and start the server."""

import argparse
import sys

from sitemapd.app import SitemapApp
from sitemapd.cli._build import build_app_config, build_sitemap, configure_logging
from sitemapd.errors import ConfigurationError


def run_server(args: argparse.Namespace) -> None:
    """Start the sitemap server.

    With ``--validate`` the sitemap file is checked here, before any
    socket is bound, and again by the app's lifespan startup.
    """
    config = build_app_config(args)
    configure_logging(config.log_level)

    try:
        app = SitemapApp(build_sitemap(args), config)
        if config.validate_on_startup:
            app.check()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    app.run()
