"""Custom not-found strategy — 410 Gone with a pointer to the sitemap.

Any object with ``handle_not_found()`` can replace the built-in
strategies; no registration is needed.

Run:
    python app.py
"""

from pathlib import Path

from sitemapd import Response, SitemapApp, SitemapBuilder

SITEMAP_FILE = Path(__file__).parent.parent / "well_known" / "sitemaps.xml"


class GoneWithHint:
    """Tell crawlers the old URLs are gone and where the sitemap lives."""

    __slots__ = ("sitemap_url",)

    def __init__(self, sitemap_url: str) -> None:
        self.sitemap_url = sitemap_url

    def handle_not_found(self) -> Response:
        return (
            Response(body=f"410 Gone. Sitemap: {self.sitemap_url}", status=410)
            .with_header("Link", f'<{self.sitemap_url}>; rel="sitemap"')
        )


builder = SitemapBuilder().static_file(SITEMAP_FILE).web_filename("sitemap.xml")
sitemap = builder.not_found_strategy(GoneWithHint("/sitemap.xml")).build()

app = SitemapApp(sitemap)


if __name__ == "__main__":
    app.run()
