"""Domain objects for WordCrawl - explicit re-exports to satisfy linters."""
from .config import CrawlConfiguration as CrawlConfiguration
from .crawl_context import CrawlContext as CrawlContext
from .crawl_result import CrawlResult as CrawlResult
from .page import ParsedPage as ParsedPage
from .visited_registry import VisitedRegistry as VisitedRegistry
from .word_counts import WordCountAggregator as WordCountAggregator

__all__ = [
    "CrawlConfiguration",
    "CrawlContext",
    "CrawlResult",
    "ParsedPage",
    "VisitedRegistry",
    "WordCountAggregator",
]
