import logging
from typing import Pattern, Sequence

from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.services.clock import Clock

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth limits, the deadline and ignored URLs.

    Separates policy decisions from crawl orchestration logic. Holds only
    read-only settings, so one policy is safely shared by every task.
    """

    def __init__(self, clock: Clock, ignored_urls: Sequence[Pattern[str]] = ()):
        self.clock = clock
        self.ignored_urls = tuple(ignored_urls)

    def should_skip_due_to_depth(self, depth: int) -> bool:
        """Check if a branch has no depth left."""
        if depth <= 0:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_skip_due_to_deadline(self, context: CrawlContext) -> bool:
        """Check if no new work may start, because time is up or the crawl failed."""
        if context.has_failed():
            logger.debug("Skipping (crawl failed)")
            return True
        if self.clock.now() >= context.deadline:
            logger.debug("Skipping (deadline %s passed)", context.deadline)
            return True
        return False

    def should_skip_due_to_ignore(self, url: str) -> bool:
        """Check if URL fully matches an ignored-URL pattern."""
        for pattern in self.ignored_urls:
            if pattern.fullmatch(url):
                logger.debug("Skipping (ignored by %s) %s", pattern.pattern, url)
                return True
        return False
