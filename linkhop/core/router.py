"""Router: turns a command token + full argument string into a destination URL.

Invariants:
    - Strict order: prefix rule -> registry lookup -> default search
    - Total: every input (including "") yields a non-empty URL; never raises
    - Handler output returned verbatim (no post-processing or validation)
    - Pure: no logging, no persistence, no history (serving layer owns those)
    - resolve() never applies aliases; route() applies them exactly once

Design Decisions:
    - Config is a structural Protocol: core stays independent of pydantic-settings
    - Without config the fallback is Google search with the raw text as the query
"""

from collections.abc import Mapping
from typing import Protocol

from linkhop.core.alias_resolver import resolve_alias
from linkhop.core.command import first_token
from linkhop.core.domain_types import ResolvedCommand, SearchEngine
from linkhop.core.prefix_dispatch import PrefixDispatcher
from linkhop.core.registry import CommandRegistry
from linkhop.core.search import engine_search_url

DEFAULT_SEARCH_ENGINE = SearchEngine.GOOGLE


class RouterConfig(Protocol):
    """What the router reads from configuration."""

    @property
    def aliases(self) -> Mapping[str, str]: ...

    def search_url(self, query: str) -> str: ...


class Router:
    """Orchestrates prefix dispatch, registry lookup and default-search fallback."""

    def __init__(
        self,
        registry: CommandRegistry,
        prefixes: PrefixDispatcher | None = None,
    ):
        self.registry = registry
        self.prefixes = prefixes or PrefixDispatcher()

    def resolve(
        self, command: str, full_args: str, config: RouterConfig | None = None,
    ) -> str:
        url = self.prefixes.dispatch(command)
        if url is not None:
            return url

        handler = self.registry.lookup(command)
        if handler is not None:
            return handler.process(full_args)

        if config is not None:
            return config.search_url(full_args)
        return engine_search_url(DEFAULT_SEARCH_ENGINE, full_args)

    def route(
        self, raw: str, config: RouterConfig | None = None,
    ) -> ResolvedCommand:
        """Request-level entry: alias substitution, tokenization, resolution."""
        expanded = resolve_alias(raw, config.aliases) if config is not None else raw
        return ResolvedCommand(
            raw_args=expanded,
            destination_url=self.resolve(first_token(expanded), expanded, config),
        )
