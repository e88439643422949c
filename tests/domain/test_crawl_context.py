from datetime import datetime, timezone

from wordcrawl.domain.crawl_context import CrawlContext


def test_new_context_starts_empty():
    context = CrawlContext(deadline=datetime(2030, 1, 1, tzinfo=timezone.utc), max_depth=3)
    assert len(context.visited) == 0
    assert context.word_counts.is_empty()
    assert context.max_depth == 3
    assert not context.has_failed()


def test_contexts_do_not_share_state():
    deadline = datetime(2030, 1, 1, tzinfo=timezone.utc)
    first = CrawlContext(deadline=deadline, max_depth=1)
    second = CrawlContext(deadline=deadline, max_depth=1)
    first.visited.try_claim("http://a")
    first.word_counts.merge({"x": 1})
    assert len(second.visited) == 0
    assert second.word_counts.is_empty()


def test_record_failure_keeps_first_error():
    context = CrawlContext(deadline=datetime(2030, 1, 1, tzinfo=timezone.utc), max_depth=1)
    first = RuntimeError("first")
    context.record_failure(first)
    context.record_failure(RuntimeError("second"))
    assert context.failure is first
    assert context.has_failed()
