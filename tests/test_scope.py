# File: tests/test_scope.py
import pytest

from gif_scout.crawler.scope import ScopePolicy, base_domain, in_scope, origin_of


def test_origin_of_applies_default_ports():
    assert origin_of("https://Example.com/a") == ("https", "example.com", 443)
    assert origin_of("http://example.com:8080/") == ("http", "example.com", 8080)
    assert origin_of("javascript:void(0)") is None
    assert origin_of("http://example.com:99999/") is None


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://www.example.com/page", True),
        ("http://www.example.com:80/page", True),
        ("https://www.example.com/page", False),
        ("http://www.example.com:8080/page", False),
        ("http://static.example.com/page", False),
        ("javascript:void(0)", False),
        ("http://[::1", False),
    ],
)
def test_same_origin_only(url, expected):
    policy = ScopePolicy.from_url("http://www.example.com/start")
    assert policy.allows(url) is expected


def test_subdomains_when_enabled():
    policy = ScopePolicy.from_url("https://www.example.com/", include_subdomains=True)
    assert policy.allows("https://static.example.com/x")
    assert policy.allows("http://example.com/")
    assert policy.allows("https://a.b.example.com/")
    assert not policy.allows("https://example.org/")
    assert not policy.allows("https://notexample.com/")
    assert not policy.allows("mailto:someone@example.com")


def test_base_domain_is_last_two_labels():
    assert base_domain("www.example.com") == "example.com"
    assert base_domain("localhost") == "localhost"
    # not public-suffix aware
    assert base_domain("shop.example.co.uk") == "co.uk"


def test_in_scope_function_form():
    origin = ("http", "www.example.com", 80)
    assert in_scope("http://www.example.com/x", origin, "example.com", False)
    assert not in_scope("http://cdn.example.com/x", origin, "example.com", False)
    assert in_scope("http://cdn.example.com/x", origin, "example.com", True)


def test_start_url_must_be_http():
    with pytest.raises(ValueError):
        ScopePolicy.from_url("file:///tmp/index.html")
