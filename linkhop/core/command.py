"""Command Capability: the uniform interface every command handler implements.

Invariants:
    - process() never raises and never returns an empty string
    - process() is deterministic and free of network/disk I/O
    - process() receives the full argument string, command token included
    - BINDINGS is non-empty, case-sensitive and free of whitespace
    - Encoding helpers replace unencodable characters (lone surrogates) instead of raising

Design Decisions:
    - ABC with class-level metadata (BINDINGS, DESCRIPTION, EXAMPLE): a command is
      declared in one place, instances are stateless
    - SearchCommand covers the common "home page, or search when given text" shape
"""

from abc import ABC, abstractmethod
from typing import ClassVar
from urllib.parse import quote, quote_plus

from linkhop.core.domain_types import CommandDescriptor


def command_args(args: str) -> str:
    """Everything after the first whitespace-delimited token, stripped."""
    parts = args.strip().split(maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""


def first_token(args: str) -> str:
    parts = args.split(maxsplit=1)
    return parts[0] if parts else ""


def encode_query(text: str) -> str:
    return quote_plus(text, errors="replace")


def encode_path(text: str, safe: str = "") -> str:
    return quote(text, safe=safe, errors="replace")


class Command(ABC):
    """A pluggable unit mapping raw arguments to a destination URL."""

    BINDINGS: ClassVar[tuple[str, ...]] = ()
    DESCRIPTION: ClassVar[str] = ""
    EXAMPLE: ClassVar[str] = ""

    def bindings(self) -> frozenset[str]:
        return frozenset(self.BINDINGS)

    @abstractmethod
    def process(self, args: str) -> str:
        """Map the full argument string to a URL."""

    def describe(self) -> CommandDescriptor:
        return CommandDescriptor(
            bindings=tuple(self.BINDINGS),
            description=self.DESCRIPTION,
            example=self.EXAMPLE,
        )

    @property
    def name(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{self.name}(bindings={list(self.BINDINGS)})"


class SearchCommand(Command):
    """Home page without arguments, the service's search page otherwise."""

    HOME_URL: ClassVar[str] = ""
    SEARCH_URL: ClassVar[str] = ""  # contains {query}

    def process(self, args: str) -> str:
        query = command_args(args)
        if not query:
            return self.HOME_URL
        return self.search(query)

    def search(self, query: str) -> str:
        return self.SEARCH_URL.replace("{query}", encode_query(query))
