"""Well-known sitemap — the default deployment.

Serves ``sitemaps.xml`` from this directory at
``/.well-known/sitemaps.xml`` and answers everything else with
``404 Not Found``.

Run:
    python app.py
"""

from pathlib import Path

from sitemapd import AppConfig, ShowErrorMessage, SitemapApp, SitemapBuilder

SITEMAP_FILE = Path(__file__).parent / "sitemaps.xml"

sitemap = (
    SitemapBuilder()
    .static_file(SITEMAP_FILE)
    .web_directory(".well-known")
    .web_filename("sitemaps.xml")
    .not_found_strategy(ShowErrorMessage())
    .build()
)

app = SitemapApp(sitemap, AppConfig(host="127.0.0.1", port=8080, validate_on_startup=True))


if __name__ == "__main__":
    app.run()
