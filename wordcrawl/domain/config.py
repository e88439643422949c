from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable, Optional, Pattern, Tuple, Union

from wordcrawl.exceptions import ConfigError

PatternLike = Union[str, Pattern[str]]


def compile_patterns(patterns: Optional[Iterable[PatternLike]], *, kind: str) -> Tuple[Pattern[str], ...]:
    """Compile each pattern, raising ConfigError on the first malformed one."""
    compiled = []
    for p in patterns or ():
        if isinstance(p, re.Pattern):
            compiled.append(p)
            continue
        if not isinstance(p, str):
            raise ConfigError(f"{kind} pattern must be a string, got {type(p).__name__}")
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            raise ConfigError(f"invalid {kind} pattern {p!r}: {e}") from e
    return tuple(compiled)


@dataclass(frozen=True)
class CrawlConfiguration:
    """Settings for one crawl. Validated once at construction and never mutated.

    `ignored_urls` and `ignored_words` accept strings or compiled patterns;
    strings are compiled here so a bad pattern fails before any crawling.
    """

    timeout: timedelta
    max_depth: int
    popular_word_count: int
    parallelism: int = 1
    ignored_urls: Tuple[Pattern[str], ...] = ()
    ignored_words: Tuple[Pattern[str], ...] = ()
    start_pages: Tuple[str, ...] = field(default_factory=tuple)
    result_path: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.timeout, timedelta):
            raise ConfigError("timeout must be a timedelta")
        if self.timeout < timedelta(0):
            raise ConfigError("timeout must be >= 0")
        if self.max_depth < 0:
            raise ConfigError("max_depth must be >= 0")
        if self.popular_word_count < 0:
            raise ConfigError("popular_word_count must be >= 0")
        if self.parallelism < 1:
            raise ConfigError("parallelism must be >= 1")
        # frozen dataclass: normalize via object.__setattr__
        object.__setattr__(self, "ignored_urls", compile_patterns(self.ignored_urls, kind="ignored_urls"))
        object.__setattr__(self, "ignored_words", compile_patterns(self.ignored_words, kind="ignored_words"))
        object.__setattr__(self, "start_pages", tuple(self.start_pages or ()))
