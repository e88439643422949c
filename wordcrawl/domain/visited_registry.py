import threading
from typing import Set


class VisitedRegistry:
    """
    Tracks which URLs have been claimed during a single crawl.

    Claiming is the only way in: `try_claim` checks and records a URL under
    one lock, so when several tasks race on the same URL exactly one of them
    wins. Entries are never removed; the registry only lives as long as the
    crawl that created it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def try_claim(self, url: str) -> bool:
        """Record `url` as claimed. Returns False if it was already claimed."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._visited

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
