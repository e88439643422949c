import logging
import re
from collections import Counter
from typing import Optional, Pattern, Protocol, Sequence

from wordcrawl.domain.page import ParsedPage
from wordcrawl.services.html_text_extractor import HtmlTextExtractor
from wordcrawl.services.http_service import HttpService

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"\W")


class PageParser(Protocol):
    """Fetch and parse one URL. Implementations may raise on failure."""

    def parse(self, url: str) -> ParsedPage: ...


def count_words(text: str, ignored_words: Sequence[Pattern[str]] = ()) -> Counter:
    """Lower-cased word counts for `text`, skipping ignored words.

    Punctuation and other non-word characters are stripped from each
    whitespace-separated token before counting.
    """
    counts: Counter = Counter()
    for token in _WHITESPACE.split(text):
        word = _NON_WORD.sub("", token).lower()
        if not word:
            continue
        if any(p.fullmatch(word) for p in ignored_words):
            continue
        counts[word] += 1
    return counts


class HtmlPageParser:
    """PageParser backed by an HTTP fetch and BeautifulSoup."""

    def __init__(
        self,
        http_service: HttpService,
        text_extractor: Optional[HtmlTextExtractor] = None,
        ignored_words: Sequence[Pattern[str]] = (),
    ):
        self.http_service = http_service
        self.text_extractor = text_extractor or HtmlTextExtractor()
        self.ignored_words = tuple(ignored_words)

    def parse(self, url: str) -> ParsedPage:
        response = self.http_service.fetch_html(url)
        if response is None:
            return ParsedPage(word_counts={}, links=[])

        soup = self.text_extractor.soup(response.text or "")
        # links first: text extraction decomposes parts of the tree
        links = self.text_extractor.extract_links(url, soup)
        text = self.text_extractor.extract_text(soup)
        return ParsedPage(word_counts=dict(count_words(text, self.ignored_words)), links=links)
