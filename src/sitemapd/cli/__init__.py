"""sitemapd CLI — serve a sitemap or check its configuration.

Entry point registered as ``sitemapd`` in ``pyproject.toml``::

    [project.scripts]
    sitemapd = "sitemapd.cli:main"
"""

import argparse
import sys

from sitemapd.strategies import BUILTIN_STRATEGIES


def _add_sitemap_arguments(parser: argparse.ArgumentParser) -> None:
    """Flags shared by ``run`` and ``check``. Omitted flags keep builder defaults."""
    parser.add_argument("--file", default=None, help="Physical path of the sitemap file")
    parser.add_argument(
        "--web-directory",
        default=None,
        help="URL directory the sitemap is served under (e.g. .well-known)",
    )
    parser.add_argument("--web-filename", default=None, help="URL filename of the sitemap")
    parser.add_argument(
        "--not-found",
        choices=sorted(BUILTIN_STRATEGIES),
        default=None,
        help="Response for every other path (default: error)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``sitemapd`` command."""
    parser = argparse.ArgumentParser(
        prog="sitemapd",
        description="sitemapd — serve one XML sitemap at one configurable URL.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- sitemapd run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the sitemap server")
    _add_sitemap_arguments(run_parser)
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect)",
    )
    run_parser.add_argument("--log-level", default=None, help="Log level (default: info)")
    run_parser.add_argument(
        "--debug",
        action="store_true",
        help="Show error details in 500 responses and reload on changes",
    )
    run_parser.add_argument(
        "--validate",
        action="store_true",
        help="Refuse to start if the sitemap file is unreadable",
    )

    # -- sitemapd check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate the sitemap configuration")
    _add_sitemap_arguments(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from sitemapd.cli._run import run_server

        run_server(args)
    elif args.command == "check":
        from sitemapd.cli._check import run_check

        run_check(args)
