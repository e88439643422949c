import argparse
import logging
import sys
from typing import Optional, Sequence

from wordcrawl import config as env
from wordcrawl.container import Container
from wordcrawl.exceptions import ConfigError, ConfigNotFoundError, CrawlError

logger = logging.getLogger(__name__)

EXIT_BAD_CONFIG = 2
EXIT_CRAWL_FAILED = 3


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordcrawl",
        description="Crawl from the start pages in a YAML config and report the most popular words.",
    )
    parser.add_argument("config", help="path to a YAML crawl config (relative paths resolve against WORDCRAWL_CONFIGS_DIR)")
    parser.add_argument("--output", help="write the JSON result here instead of the config's result_path")
    return parser


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=env.log_level(),
        format="%(asctime)s %(levelname)s %(threadName)s %(name)s: %(message)s",
    )

    if container is None:
        container = Container()

    store = container.config_file_store()
    try:
        data = store.load_yaml_dict(args.config)
        if data is None:
            available = store.list_config_files()
            if available:
                logger.info("Configs available in %s: %s", store.configs_dir, ", ".join(available))
            raise ConfigNotFoundError(args.config, "not found or not a YAML mapping")
        crawl_config = container.config_parser().parse(config_path=args.config, data=data)
    except (ConfigNotFoundError, ConfigError) as e:
        logger.error("%s", e)
        return EXIT_BAD_CONFIG

    if not crawl_config.start_pages:
        logger.warning("Config %s has no start_pages; nothing to crawl", args.config)

    orchestrator = container.crawl_orchestrator(
        parser=container.page_parser(ignored_words=crawl_config.ignored_words),
    )
    try:
        result = orchestrator.crawl_configured(crawl_config)
    except CrawlError as e:
        logger.error("%s", e)
        return EXIT_CRAWL_FAILED

    container.result_writer().write(result, path=args.output or crawl_config.result_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
