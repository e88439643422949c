import threading
from datetime import datetime
from typing import Optional

from wordcrawl.domain.visited_registry import VisitedRegistry
from wordcrawl.domain.word_counts import WordCountAggregator


class CrawlContext:
    """State shared by every task of one crawl invocation.

    A new context is built for each call to `CrawlOrchestrator.crawl`; tasks
    hold it by reference and nothing here outlives that call.
    """

    def __init__(
        self,
        deadline: datetime,
        max_depth: int,
        visited: Optional[VisitedRegistry] = None,
        word_counts: Optional[WordCountAggregator] = None,
    ):
        self.deadline = deadline
        self.max_depth = max_depth
        self.visited = visited if visited is not None else VisitedRegistry()
        self.word_counts = word_counts if word_counts is not None else WordCountAggregator()
        self._failure_lock = threading.Lock()
        self._failure: Optional[BaseException] = None

    def record_failure(self, error: BaseException) -> None:
        """Keep the first fatal error raised by any task."""
        with self._failure_lock:
            if self._failure is None:
                self._failure = error

    @property
    def failure(self) -> Optional[BaseException]:
        with self._failure_lock:
            return self._failure

    def has_failed(self) -> bool:
        return self.failure is not None
