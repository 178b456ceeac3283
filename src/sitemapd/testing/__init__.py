"""Test utilities for sitemapd applications.

Provides an in-process test client and response assertions::

    from sitemapd.testing import TestClient, assert_sitemap
"""

from sitemapd.testing.assertions import (
    assert_not_found,
    assert_redirect,
    assert_server_error,
    assert_sitemap,
    response_headers,
)
from sitemapd.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_not_found",
    "assert_redirect",
    "assert_server_error",
    "assert_sitemap",
    "response_headers",
]
