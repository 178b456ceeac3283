"""Turns parsed CLI flags into sitemapd configuration objects."""

import argparse
import logging

from sitemapd.config import AppConfig
from sitemapd.sitemap import SitemapBuilder, SitemapConfig
from sitemapd.strategies import strategy_from_name


def build_sitemap(args: argparse.Namespace) -> SitemapConfig:
    """Apply only the sitemap flags that were given on top of the defaults."""
    builder = SitemapBuilder()
    if args.file is not None:
        builder = builder.static_file(args.file)
    if args.web_directory is not None:
        builder = builder.web_directory(args.web_directory)
    if args.web_filename is not None:
        builder = builder.web_filename(args.web_filename)
    if args.not_found is not None:
        builder = builder.not_found_strategy(strategy_from_name(args.not_found))
    return builder.build()


def build_app_config(args: argparse.Namespace) -> AppConfig:
    """Server settings from ``run`` flags; omitted flags keep AppConfig defaults."""
    defaults = AppConfig()
    return AppConfig(
        host=args.host or defaults.host,
        port=args.port if args.port is not None else defaults.port,
        debug=args.debug,
        workers=args.workers if args.workers is not None else defaults.workers,
        log_level=args.log_level or defaults.log_level,
        validate_on_startup=args.validate,
    )


def configure_logging(level: str) -> None:
    """Root logging for the CLI process. Unknown names fall back to INFO."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
