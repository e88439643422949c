import logging
from datetime import timedelta

from wordcrawl.domain.config import CrawlConfiguration
from wordcrawl.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_DEPTH = 2
DEFAULT_POPULAR_WORD_COUNT = 10


def _as_int(data: dict, key: str, default: int) -> int:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    return value


def _as_str_list(data: dict, key: str) -> list[str]:
    value = data.get(key) or []
    if isinstance(value, str) or not isinstance(value, list):
        raise ConfigError(f"{key} must be a list")
    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"{key} entries must be strings, got {item!r}")
    return value


class CrawlerConfigParser:
    """Parse a YAML dict into a CrawlConfiguration.

    Responsibility: schema/validation for YAML config files.
    It does NOT perform filesystem IO.
    """

    def __init__(self, default_parallelism: int = 1):
        self.default_parallelism = default_parallelism

    def parse(self, *, config_path: str, data: dict) -> CrawlConfiguration:
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path}: top level must be a mapping")

        timeout_seconds = data.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
        if isinstance(timeout_seconds, bool) or not isinstance(timeout_seconds, (int, float)):
            raise ConfigError(f"timeout_seconds must be a number, got {timeout_seconds!r}")

        result_path = data.get("result_path")
        if result_path is not None and not isinstance(result_path, str):
            raise ConfigError(f"result_path must be a string, got {result_path!r}")

        try:
            cfg = CrawlConfiguration(
                timeout=timedelta(seconds=timeout_seconds),
                max_depth=_as_int(data, "max_depth", DEFAULT_MAX_DEPTH),
                popular_word_count=_as_int(data, "popular_word_count", DEFAULT_POPULAR_WORD_COUNT),
                parallelism=_as_int(data, "parallelism", self.default_parallelism),
                ignored_urls=_as_str_list(data, "ignored_urls"),
                ignored_words=_as_str_list(data, "ignored_words"),
                start_pages=_as_str_list(data, "start_pages"),
                result_path=result_path,
            )
        except ConfigError as e:
            raise ConfigError(f"{config_path}: {e}") from e
        logger.debug("Parsed crawl config %s: %s", config_path, cfg)
        return cfg
