import logging
import threading
from typing import Callable, List, Optional

from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.page import ParsedPage
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.page_parser import PageParser

logger = logging.getLogger(__name__)


class CrawlTask:
    """Crawl one URL to a remaining depth and fan out over its links.

    A task is done only when its whole subtree is done. Rather than blocking
    a worker thread on its children, each task keeps a pending count: one for
    itself plus one per spawned child. Whoever brings the count to zero sets
    `done` and releases one count on the parent, so completion ripples up to
    the root without any worker waiting.
    """

    def __init__(
        self,
        url: str,
        remaining_depth: int,
        context: CrawlContext,
        policy: CrawlPolicy,
        parser: PageParser,
        submit: Callable[["CrawlTask"], object],
        parent: Optional["CrawlTask"] = None,
    ):
        self.url = url
        self.remaining_depth = remaining_depth
        self.context = context
        self.policy = policy
        self.parser = parser
        self.submit = submit
        self.parent = parent
        self.done = threading.Event()
        self._lock = threading.Lock()
        self._pending = 1

    def run(self) -> None:
        try:
            page = self._visit()
            if page is not None:
                self._spawn_children(page.links)
        except Exception as e:
            logger.exception("Crawl task failed for %s", self.url)
            self.context.record_failure(e)
        finally:
            self._release()

    def _visit(self) -> Optional[ParsedPage]:
        """Steps up to the merge. Returns the parsed page, or None if skipped."""
        if self.policy.should_skip_due_to_depth(self.remaining_depth):
            return None
        if self.policy.should_skip_due_to_deadline(self.context):
            return None
        if self.policy.should_skip_due_to_ignore(self.url):
            return None
        if not self.context.visited.try_claim(self.url):
            logger.debug("Skipping (visited) %s", self.url)
            return None

        page = self._parse()
        self.context.word_counts.merge(page.word_counts)
        logger.info("Crawled %s -> %d words, %d links", self.url, len(page.word_counts), len(page.links))
        return page

    def _parse(self) -> ParsedPage:
        try:
            return self.parser.parse(self.url)
        except Exception as e:
            # one bad page must not abort the crawl
            logger.warning("Parse failed for %s: %s", self.url, e)
            return ParsedPage(word_counts={}, links=[])

    def _spawn_children(self, links: List[str]) -> None:
        for link in links:
            child = CrawlTask(
                link,
                self.remaining_depth - 1,
                self.context,
                self.policy,
                self.parser,
                self.submit,
                parent=self,
            )
            with self._lock:
                self._pending += 1
            try:
                self.submit(child)
            except Exception:
                with self._lock:
                    self._pending -= 1
                raise

    def _release(self) -> None:
        # iterative: a long chain of ancestors must not hit the recursion limit
        task = self
        while task is not None:
            with task._lock:
                task._pending -= 1
                finished = task._pending == 0
            if not finished:
                break
            task.done.set()
            task = task.parent
