# File: tests/test_extractor.py
from html import escape

import pytest

from gif_scout.crawler.extractor import extract_links, extract_resources, matches_extension
from gif_scout.parser.html_parser import parse_html

BASE = "http://example.com/dir/page.html"


def extract(html: str, base: str = BASE) -> set[str]:
    return extract_resources(parse_html(html), base)


def test_img_with_query_matches_case_insensitively():
    result = extract('<img src="/img/a.GIF?v=2">', "http://example.com/")
    assert result == {"http://example.com/img/a.GIF?v=2"}


def test_anchor_targets_are_resources():
    result = extract('<a href="b.gif">b</a><a href="c.png">c</a>')
    assert result == {"http://example.com/dir/b.gif"}


@pytest.mark.parametrize(
    "style,expected",
    [
        ("background-image: url('/bg/one.gif')", "http://example.com/bg/one.gif"),
        ('background-image:url("two.gif")', "http://example.com/dir/two.gif"),
        ("color: red; background: #fff url(three.gif) no-repeat", "http://example.com/dir/three.gif"),
        ("BACKGROUND-IMAGE: URL( four.gif )", "http://example.com/dir/four.gif"),
    ],
)
def test_inline_background_images(style, expected):
    assert extract(f'<div style="{escape(style)}"></div>') == {expected}


def test_non_background_style_urls_are_ignored():
    assert extract("<div style=\"mask-image: url('m.gif')\"></div>") == set()


def test_non_gif_and_query_only_matches_are_excluded():
    html = (
        '<img src="pic.png">'
        '<img src="/view?file=x.gif">'
        '<a href="/gif">no</a>'
        '<a href="/a.gif.html">no</a>'
    )
    assert extract(html) == set()


def test_malformed_and_non_http_candidates_are_skipped():
    html = (
        '<a href="http://[::1">broken</a>'
        '<a href="http://example.com:port/x.gif">bad port</a>'
        '<a href="javascript:void(0)">js</a>'
        '<a href="mailto:a@example.com">mail</a>'
        '<img src="">'
        '<img src="ok.gif">'
    )
    assert extract(html) == {"http://example.com/dir/ok.gif"}


def test_duplicates_collapse():
    html = '<img src="a.gif"><a href="a.gif"></a><div style="background-image:url(a.gif)"></div>'
    assert extract(html) == {"http://example.com/dir/a.gif"}


def test_extraction_is_idempotent():
    document = parse_html('<img src="a.gif"><a href="/b.GIF#top">b</a>')
    first = extract_resources(document, BASE)
    second = extract_resources(document, BASE)
    assert first == second == {"http://example.com/dir/a.gif", "http://example.com/b.GIF#top"}


def test_matches_extension():
    assert matches_extension("http://example.com/a.Gif?x=1")
    assert not matches_extension("http://example.com/?a=b.gif")
    assert not matches_extension("http://[::1")


def test_extract_links_keeps_document_order_and_skips_broken():
    document = parse_html('<a href="/one">1</a><a href="http://[::1">x</a><a href="two#frag">2</a>')
    assert extract_links(document, BASE) == [
        "http://example.com/one",
        "http://example.com/dir/two#frag",
    ]
