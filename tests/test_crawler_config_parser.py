from datetime import timedelta

import pytest

from wordcrawl.exceptions import ConfigError
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser


def test_parse_full_config():
    parser = CrawlerConfigParser()
    cfg = parser.parse(
        config_path="configs/site.yml",
        data={
            "start_pages": ["https://example.com"],
            "ignored_urls": [".*\\.pdf"],
            "ignored_words": ["^.{1,3}$"],
            "parallelism": 8,
            "max_depth": 3,
            "timeout_seconds": 2.5,
            "popular_word_count": 7,
            "result_path": "out.json",
        },
    )
    assert cfg.start_pages == ("https://example.com",)
    assert cfg.ignored_urls[0].fullmatch("http://x/a.pdf")
    assert cfg.ignored_words[0].fullmatch("the")
    assert cfg.parallelism == 8
    assert cfg.max_depth == 3
    assert cfg.timeout == timedelta(seconds=2.5)
    assert cfg.popular_word_count == 7
    assert cfg.result_path == "out.json"


def test_parse_defaults():
    parser = CrawlerConfigParser(default_parallelism=3)
    cfg = parser.parse(config_path="a.yml", data={})
    assert cfg.start_pages == ()
    assert cfg.ignored_urls == ()
    assert cfg.parallelism == 3
    assert cfg.max_depth == 2
    assert cfg.popular_word_count == 10
    assert cfg.timeout == timedelta(seconds=10)
    assert cfg.result_path is None


def test_parse_null_values_fall_back_to_defaults():
    cfg = CrawlerConfigParser().parse(config_path="a.yml", data={"max_depth": None, "ignored_urls": None})
    assert cfg.max_depth == 2
    assert cfg.ignored_urls == ()


@pytest.mark.parametrize(
    "data",
    [
        {"max_depth": "two"},
        {"max_depth": True},
        {"parallelism": 0},
        {"timeout_seconds": "10s"},
        {"ignored_urls": "not-a-list"},
        {"ignored_urls": ["(bad"]},
        {"start_pages": [1, 2]},
        {"result_path": 5},
    ],
)
def test_parse_invalid_values_raise_config_error(data):
    with pytest.raises(ConfigError):
        CrawlerConfigParser().parse(config_path="bad.yml", data=data)


def test_parse_error_names_config_file():
    with pytest.raises(ConfigError, match="bad.yml"):
        CrawlerConfigParser().parse(config_path="bad.yml", data={"max_depth": -1})


def test_parse_rejects_non_mapping():
    with pytest.raises(ConfigError):
        CrawlerConfigParser().parse(config_path="list.yml", data=["a"])
