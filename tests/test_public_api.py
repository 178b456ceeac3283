"""Tests for the lazy top-level ``sitemapd`` namespace."""

import pytest

import sitemapd


class TestPublicAPI:
    @pytest.mark.parametrize("name", sitemapd.__all__)
    def test_exported_names_resolve(self, name: str) -> None:
        assert getattr(sitemapd, name) is not None

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError, match="no attribute"):
            sitemapd.DoesNotExist  # noqa: B018

    def test_same_objects_as_modules(self) -> None:
        from sitemapd.sitemap import SitemapBuilder

        assert sitemapd.SitemapBuilder is SitemapBuilder
