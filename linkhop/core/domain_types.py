"""Domain Types: value objects shared by the registry, the router and the API layer.

Invariants:
    - CommandDescriptor and ResolvedCommand are frozen (never mutated after creation)
    - CommandDescriptor.bindings keeps declaration order (first binding is the primary one)
    - All valid search engines encoded as an Enum, no raw string matching

Design Decisions:
    - str Enum for SearchEngine: round-trips through env vars and TOML without custom parsing
"""

from dataclasses import dataclass
from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class SearchEngine(str, Enum):
    """Built-in fallback search providers."""
    GOOGLE = "google"
    DDG = "ddg"
    BING = "bing"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class CommandDescriptor:
    """Presentation metadata for one command, derived at registry-build time."""
    bindings: tuple[str, ...]
    description: str
    example: str

    @property
    def primary_binding(self) -> str:
        return self.bindings[0] if self.bindings else ""


@dataclass(frozen=True)
class ResolvedCommand:
    """Outcome of routing one request. Produced and discarded per request."""
    raw_args: str
    destination_url: str
