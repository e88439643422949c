import json
import logging
import sys
from typing import Optional, TextIO

from wordcrawl.domain.crawl_result import CrawlResult

logger = logging.getLogger(__name__)


class CrawlResultWriter:
    """Render a CrawlResult as JSON to a file or a text stream."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def to_json(self, result: CrawlResult) -> str:
        # word order is the ranking order, so keys must not be sorted
        return json.dumps(result.as_dict(), indent=self.indent)

    def write(self, result: CrawlResult, path: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
        payload = self.to_json(result)
        if path:
            with open(path, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
            logger.info("Wrote crawl result to %s", path)
            return
        out = stream if stream is not None else sys.stdout
        out.write(payload)
        out.write("\n")
