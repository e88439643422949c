import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Sequence

from wordcrawl.domain.config import CrawlConfiguration
from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.exceptions import ConfigError, CrawlError
from wordcrawl.services.clock import Clock, SystemClock
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.crawl_task import CrawlTask
from wordcrawl.services.page_parser import PageParser

logger = logging.getLogger(__name__)

_JOIN_POLL_SECONDS = 0.1


class CrawlOrchestrator:
    """Runs a parallel, depth-limited, deadline-bounded crawl.

    This class owns the crawl control-flow: it builds a fresh CrawlContext per
    call, launches one root task per seed on a bounded thread pool, waits for
    every subtree and assembles the CrawlResult. It does NOT construct the
    page parser (that stays in the DI layer).
    """

    def __init__(self, parser: PageParser, clock: Optional[Clock] = None):
        self.parser = parser
        self.clock = clock or SystemClock()

    def max_parallelism(self) -> int:
        return os.cpu_count() or 1

    def crawl(self, seed_urls: Sequence[str], config: CrawlConfiguration) -> CrawlResult:
        if config is None:
            raise ConfigError("config is required for crawl")
        if isinstance(seed_urls, str):
            raise ConfigError("seed_urls must be a sequence of URLs, not a single string")

        context = CrawlContext(
            deadline=self.clock.now() + config.timeout,
            max_depth=config.max_depth,
        )
        policy = CrawlPolicy(self.clock, config.ignored_urls)
        workers = min(config.parallelism, self.max_parallelism())
        logger.info(
            "Starting crawl of %d seed(s): depth=%s timeout=%s workers=%s",
            len(seed_urls), config.max_depth, config.timeout, workers,
        )

        # set when an error escapes a task, leaving its subtree count unbalanced
        aborted = threading.Event()

        def on_task_done(future: Future) -> None:
            error = future.exception()
            if error is not None:
                logger.error("Crawl task escaped with %r", error, exc_info=error)
                context.record_failure(error)
                aborted.set()

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wordcrawl") as pool:
            def submit(task: CrawlTask) -> Future:
                future = pool.submit(task.run)
                future.add_done_callback(on_task_done)
                return future

            roots = [
                CrawlTask(url, context.max_depth, context, policy, self.parser, submit)
                for url in seed_urls
            ]
            for root in roots:
                submit(root)
            for root in roots:
                while not root.done.wait(_JOIN_POLL_SECONDS):
                    if aborted.is_set():
                        break

        if context.failure is not None:
            raise CrawlError(f"crawl aborted: {context.failure}") from context.failure

        urls_visited = len(context.visited)
        if context.word_counts.is_empty():
            result = CrawlResult(word_counts={}, urls_visited=urls_visited)
        else:
            ranked = context.word_counts.rank(config.popular_word_count)
            result = CrawlResult(word_counts=dict(ranked), urls_visited=urls_visited)
        logger.info("Crawl finished: %d URL(s) visited, %d popular word(s)", result.urls_visited, len(result.word_counts))
        return result

    def crawl_configured(self, config: CrawlConfiguration) -> CrawlResult:
        """Crawl the start pages named in `config`."""
        return self.crawl(list(config.start_pages), config)
