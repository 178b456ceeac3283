"""Server configuration.

AppConfig is a frozen dataclass: immutable after creation, shared by
every request handler, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Server configuration. Immutable after creation.

    The sitemap itself (file, virtual path, not-found strategy) lives in
    ``SitemapConfig``; this holds how the process is served::

        config = AppConfig(host="0.0.0.0", port=3000, validate_on_startup=True)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    workers: int = 1

    # Logging
    log_level: str = "info"
    log_format: str = "text"

    # Check the sitemap file during ASGI lifespan startup instead of on
    # the first matching request.
    validate_on_startup: bool = False
