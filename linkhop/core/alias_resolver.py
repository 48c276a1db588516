"""Alias Resolver: user-defined shortcuts substituted before tokenization.

Invariants:
    - Match is on the whole (stripped) input, case-sensitive
    - Single pass: an expansion that is itself an alias key is NOT expanded again
    - Unknown input is returned unchanged
"""

from collections.abc import Mapping


def resolve_alias(raw: str, aliases: Mapping[str, str] | None) -> str:
    """Replace the entire input with its alias expansion, if it has one."""
    if not aliases:
        return raw
    expansion = aliases.get(raw.strip())
    return raw if expansion is None else expansion


def find_alias_cycle(aliases: Mapping[str, str]) -> list[str] | None:
    """Return the first cycle (e.g. ["a", "b", "a"]) in the alias graph, or None.

    Only used at config load time; resolution itself never follows chains.
    """
    for start in aliases:
        path = [start]
        current = aliases[start].strip()
        while current in aliases:
            if current in path:
                return path[path.index(current):] + [current]
            path.append(current)
            current = aliases[current].strip()
    return None
