# spurgeon_daily/quotes/parser.py
from __future__ import annotations

QuoteCollection = tuple[str, ...]

SEPARATOR = "\n"


def parse_quotes(text: str) -> QuoteCollection:
    """
    Split raw resource text into an ordered collection, one entry per line.

    Entries are kept verbatim: no trimming, no dedup, no validation. An empty
    string yields ("",) and a trailing newline yields a trailing empty entry.
    """
    return tuple(text.split(SEPARATOR))
