import logging
from typing import Callable, List, Optional
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Elements whose text never shows up on the rendered page
_INVISIBLE_TAGS = ('script', 'style', 'noscript', 'template', 'head')
_FOLLOWED_SCHEMES = ('http', 'https')


class HtmlTextExtractor:
    """Pulls visible text and outbound links out of an HTML document."""

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def soup(self, body: str) -> BeautifulSoup:
        return self._soup_factory(body)

    def extract_text(self, soup: BeautifulSoup) -> str:
        for tag in _INVISIBLE_TAGS:
            for element in soup.find_all(tag):
                element.decompose()
        return soup.get_text(separator=" ", strip=True)

    def extract_links(self, base_url: str, soup: BeautifulSoup) -> List[str]:
        """Absolute http(s) links in document order, fragments removed."""
        urls = []
        for a in soup.find_all("a", href=True):
            href = a.get("href").strip()
            if not href or href.startswith("#"):
                continue
            abs_url, _ = urldefrag(urljoin(base_url, href))
            if urlparse(abs_url).scheme not in _FOLLOWED_SCHEMES:
                logger.debug("Skipping (scheme) %s on %s", abs_url, base_url)
                continue
            urls.append(abs_url)
        return urls
