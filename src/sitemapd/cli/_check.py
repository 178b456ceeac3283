"""``sitemapd check`` — validate the sitemap configuration eagerly."""

import argparse
import sys

from sitemapd.app import SitemapApp
from sitemapd.cli._build import build_sitemap
from sitemapd.errors import ConfigurationError
from sitemapd.routing import CATCH_ALL_ROUTE


def run_check(args: argparse.Namespace) -> None:
    """Print where the sitemap will be served, or exit 1 with the problem."""
    try:
        app = SitemapApp(build_sitemap(args))
        app.check()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    strategy = type(app.sitemap.not_found_strategy).__name__
    print(f"OK: {app.sitemap.static_file} -> {app.sitemap.virtual_path.url} (not found: {strategy})")
    print(f"Route: GET, HEAD {CATCH_ALL_ROUTE}")
