from typing import Dict, List, NamedTuple


class ParsedPage(NamedTuple):
    """Words and outbound links found on one page."""
    word_counts: Dict[str, int]
    links: List[str]
