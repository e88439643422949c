"""Custom exceptions for WordCrawl."""


class ConfigNotFoundError(Exception):
    """Raised when a requested crawl config file cannot be found or read."""

    def __init__(self, config_path: str, reason: str = "not found"):
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Config '{config_path}' {reason}")


class ConfigError(ValueError):
    """Raised when a crawl configuration is malformed.

    Detected eagerly, before any crawl task is launched.
    """


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class HttpStatusError(Exception):
    """Raised when a page answers with a non-2xx status."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} for {url}")


class CrawlError(Exception):
    """Raised when a crawl aborts on an unexpected internal failure."""
