import logging
from typing import Callable, Optional

import requests

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import HttpFetchError, HttpStatusError

logger = logging.getLogger(__name__)

_HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def is_html(response: HttpResponse) -> bool:
    """True when the response is HTML, or when the server did not say."""
    if not response.content_type:
        return True
    media_type = response.content_type.split(";", 1)[0].strip().lower()
    return media_type in _HTML_CONTENT_TYPES


class HttpService:
    """
    Fetches crawl pages over HTTP.

    The http_client callable (requests.get in production) is injected so
    tests can hand in a fake. Transport errors surface as HttpFetchError and
    non-2xx answers as HttpStatusError; callers decide whether either is fatal.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: float = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return status code, body text, and Content-Type."""
        try:
            resp = self.http_client(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        headers = getattr(resp, "headers", None) or {}
        return HttpResponse(resp.status_code, resp.text, headers.get("Content-Type"))

    def fetch_html(self, url: str) -> Optional[HttpResponse]:
        """Fetch a page for crawling.

        Returns None for non-HTML documents, which have no words or links
        worth following.
        """
        response = self.fetch(url)
        if not 200 <= int(response.status_code) < 300:
            raise HttpStatusError(url, response.status_code)
        if not is_html(response):
            logger.debug("Skipping (content type %s) %s", response.content_type, url)
            return None
        return response
