import threading
from collections import Counter
from typing import Dict, List, Mapping, Tuple


def _ranking_key(item: Tuple[str, int]):
    word, count = item
    return (-count, -len(word), word)


def sort_word_counts(counts: Mapping[str, int], n: int) -> List[Tuple[str, int]]:
    """Return the `n` most popular words in `counts`.

    Ordered by count (descending), then word length (descending), then the
    word itself (ascending), so equal inputs always rank the same way.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    return sorted(counts.items(), key=_ranking_key)[:n]


class WordCountAggregator:
    """Thread-safe running total of word counts across every page in a crawl."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Counter = Counter()

    def merge(self, partial_counts: Mapping[str, int]) -> None:
        """Add a page's word counts into the running total."""
        for word, count in partial_counts.items():
            if count < 0:
                raise ValueError(f"negative count {count} for word {word!r}")
        with self._lock:
            for word, count in partial_counts.items():
                if count:
                    self._counts[word] += count

    def rank(self, n: int) -> List[Tuple[str, int]]:
        """Top `n` words. Only meaningful once every merge has finished."""
        with self._lock:
            snapshot = dict(self._counts)
        return sort_word_counts(snapshot, n)

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._counts
