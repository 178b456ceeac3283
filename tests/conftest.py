"""Shared fixtures for sitemapd tests."""

from pathlib import Path

import pytest

SITEMAP_XML = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url><loc>https://example.com/</loc></url>
  <url><loc>https://example.com/über</loc></url>
</urlset>
"""


@pytest.fixture
def sitemap_xml() -> str:
    return SITEMAP_XML


@pytest.fixture
def sitemap_file(tmp_path: Path) -> Path:
    """A sitemap written to a temporary directory."""
    path = tmp_path / "sitemaps.xml"
    path.write_text(SITEMAP_XML, encoding="utf-8")
    return path


@pytest.fixture
def in_sitemap_dir(sitemap_file: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from the directory holding ``sitemaps.xml``.

    Lets the builder's relative default path resolve to the fixture file.
    """
    monkeypatch.chdir(sitemap_file.parent)
    return sitemap_file
