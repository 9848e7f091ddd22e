# File: tests/test_ledger.py
from gif_scout.crawler.ledger import VisitedLedger


def test_mark_if_new_strips_fragment():
    ledger = VisitedLedger()
    assert ledger.mark_if_new("http://example.com/a#top") is True
    assert ledger.mark_if_new("http://example.com/a") is False
    assert ledger.mark_if_new("http://example.com/a#bottom") is False
    assert len(ledger) == 1
    assert "http://example.com/a#anything" in ledger


def test_query_strings_are_distinct_pages():
    ledger = VisitedLedger()
    assert ledger.mark_if_new("http://example.com/a?p=1")
    assert ledger.mark_if_new("http://example.com/a?p=2")
    assert sorted(ledger) == ["http://example.com/a?p=1", "http://example.com/a?p=2"]
