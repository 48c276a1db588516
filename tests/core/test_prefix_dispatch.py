"""Prefix Dispatcher tests."""

from linkhop.core.prefix_dispatch import PrefixDispatcher, PrefixRule


def _echo(token: str) -> str:
    return f"https://example.com/{token}"


def test_matching_token_dispatched():
    dispatcher = PrefixDispatcher([PrefixRule("$", _echo)])
    assert dispatcher.dispatch("$MSFT") == "https://example.com/$MSFT"


def test_bare_sentinel_is_not_dispatched():
    dispatcher = PrefixDispatcher([PrefixRule("$", _echo)])
    assert dispatcher.dispatch("$") is None


def test_non_matching_token_returns_none():
    dispatcher = PrefixDispatcher([PrefixRule("$", _echo)])
    assert dispatcher.dispatch("gh") is None
    assert dispatcher.dispatch("") is None


def test_first_matching_rule_wins():
    dispatcher = PrefixDispatcher([
        PrefixRule("$", lambda t: "https://first.example"),
        PrefixRule("$$", lambda t: "https://second.example"),
    ])
    assert dispatcher.dispatch("$$X") == "https://first.example"


def test_empty_dispatcher_never_matches():
    assert PrefixDispatcher().dispatch("$AAPL") is None
