"""Crawl result data model."""
from typing import Dict, NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation."""
    word_counts: Dict[str, int]
    """Most popular words, in ranking order"""

    urls_visited: int
    """Number of distinct URLs claimed during the crawl"""

    def as_dict(self) -> dict:
        return {"wordCounts": dict(self.word_counts), "urlsVisited": self.urls_visited}
