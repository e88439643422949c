"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.services.clock import SystemClock
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.crawl_orchestrator import CrawlOrchestrator
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser
from wordcrawl.services.html_text_extractor import HtmlTextExtractor
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.page_parser import HtmlPageParser
from wordcrawl.services.result_writer import CrawlResultWriter


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# USER_AGENT (str, default: "WordCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (float seconds, default: 10)
#   Timeout for a single page fetch. The crawl deadline does not interrupt
#   a fetch already in flight, so keep this well below crawl timeouts.
#
# WORDCRAWL_CONFIGS_DIR (str, default: "configs")
#   Directory searched for relative YAML config paths.
#
# WORDCRAWL_PARALLELISM (int, default: 4)
#   Worker count used when a config file does not set `parallelism`.
#   Always capped at the number of available CPUs.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "WordCrawl/0.1"),
    "HTTP_TIMEOUT": env.get_float_env("HTTP_TIMEOUT", 10.0),
    "WORDCRAWL_CONFIGS_DIR": env.get_str_env("WORDCRAWL_CONFIGS_DIR", "configs"),
    "WORDCRAWL_PARALLELISM": env.get_int_env("WORDCRAWL_PARALLELISM", 4),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for WordCrawl."""

    config = providers.Configuration(default=ENV)

    clock = providers.Singleton(SystemClock)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(float),
    )

    text_extractor = providers.Singleton(HtmlTextExtractor)

    # Factory: ignored_words differ per crawl config
    page_parser = providers.Factory(
        HtmlPageParser,
        http_service=http_service,
        text_extractor=text_extractor,
    )

    crawl_orchestrator = providers.Factory(
        CrawlOrchestrator,
        parser=page_parser,
        clock=clock,
    )

    config_file_store = providers.Singleton(
        ConfigFileStore,
        configs_dir=config.WORDCRAWL_CONFIGS_DIR.as_(str),
    )

    config_parser = providers.Singleton(
        CrawlerConfigParser,
        default_parallelism=config.WORDCRAWL_PARALLELISM.as_(int),
    )

    result_writer = providers.Singleton(CrawlResultWriter)
