import io
import json

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.services.result_writer import CrawlResultWriter

RESULT = CrawlResult(word_counts={"zeta": 3, "alpha": 1}, urls_visited=2)


def test_write_to_stream_keeps_ranking_order():
    out = io.StringIO()
    CrawlResultWriter().write(RESULT, stream=out)
    text = out.getvalue()
    assert json.loads(text) == {"wordCounts": {"zeta": 3, "alpha": 1}, "urlsVisited": 2}
    assert text.index("zeta") < text.index("alpha")


def test_write_to_file(tmp_path):
    path = tmp_path / "result.json"
    CrawlResultWriter().write(RESULT, path=str(path))
    assert json.loads(path.read_text(encoding="utf-8"))["urlsVisited"] == 2


def test_write_defaults_to_stdout(capsys):
    CrawlResultWriter().write(CrawlResult(word_counts={}, urls_visited=0))
    assert json.loads(capsys.readouterr().out) == {"wordCounts": {}, "urlsVisited": 0}
