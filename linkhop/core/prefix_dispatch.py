"""Prefix Dispatcher: special-syntax tokens handled ahead of registry lookup.

Invariants:
    - A rule matches only when the token starts with its sentinel AND is longer than it
      (a bare sentinel such as "$" falls through to lookup/default search)
    - Rules are tried in declaration order; first match wins
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class PrefixRule:
    """A sentinel character and the handler receiving the whole token."""
    sentinel: str
    handler: Callable[[str], str]

    def matches(self, token: str) -> bool:
        return token.startswith(self.sentinel) and len(token) > len(self.sentinel)


class PrefixDispatcher:

    def __init__(self, rules: Sequence[PrefixRule] = ()):
        self._rules = tuple(rules)

    def dispatch(self, token: str) -> str | None:
        for rule in self._rules:
            if rule.matches(token):
                return rule.handler(token)
        return None
