"""Search URL construction tests."""

from linkhop.core.domain_types import SearchEngine
from linkhop.core.search import build_search_url, engine_search_url


def test_engines():
    assert engine_search_url(SearchEngine.GOOGLE, "a b") == "https://www.google.com/search?q=a+b"
    assert engine_search_url(SearchEngine.DDG, "a b") == "https://duckduckgo.com/?q=a+b"
    assert engine_search_url(SearchEngine.BING, "a b") == "https://www.bing.com/search?q=a+b"


def test_query_is_encoded():
    assert build_search_url("https://s.example/?q={query}", "c++ & rust") == (
        "https://s.example/?q=c%2B%2B+%26+rust"
    )


def test_other_braces_in_template_left_alone():
    assert build_search_url("https://s.example/{x}?q={query}", "hi") == (
        "https://s.example/{x}?q=hi"
    )


def test_unencodable_query_is_replaced_not_raised():
    assert build_search_url("https://s.example/?q={query}", "a\udcffb") == (
        "https://s.example/?q=a%3Fb"
    )
