"""Command Registry: binding -> command lookup table, built once and frozen.

Invariants:
    - The table is built exactly once per registry, even under concurrent first access
    - No reader ever observes a partially built table (publication happens after build)
    - Lookup is an exact, case-sensitive match; O(1)
    - A binding collision fails the build with DuplicateBindingError (no silent shadowing)
    - list_descriptors() returns the identical cached tuple on every call

Design Decisions:
    - Explicit registry object over a module-level singleton: the app stores one on
      app.state, tests build their own, no state leaks between tests
    - Double-checked locking with threading.Lock: the fast path after initialization
      is a plain attribute read, no lock
    - Table exposed as MappingProxyType: read-only view, mutation raises TypeError
"""

import threading
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from linkhop.core.command import Command
from linkhop.core.domain_types import CommandDescriptor
from linkhop.core.errors import DuplicateBindingError


class CommandRegistry:
    """Aggregates command capabilities into one immutable lookup table."""

    def __init__(self, commands: Sequence[Command]):
        self._commands: tuple[Command, ...] = tuple(commands)
        self._lock = threading.Lock()
        self._table: Mapping[str, Command] | None = None
        self._descriptors: tuple[CommandDescriptor, ...] | None = None

    @property
    def commands(self) -> tuple[Command, ...]:
        return self._commands

    def initialize(self) -> Mapping[str, Command]:
        """Build the lookup table once; every caller gets the same completed table."""
        table = self._table
        if table is not None:
            return table
        with self._lock:
            if self._table is None:
                descriptors = tuple(cmd.describe() for cmd in self._commands)
                built = self._build_table()
                self._descriptors = descriptors
                self._table = built
            return self._table

    def lookup(self, token: str) -> Command | None:
        return self.initialize().get(token)

    def list_descriptors(self) -> tuple[CommandDescriptor, ...]:
        self.initialize()
        return self._descriptors  # type: ignore[return-value]

    @property
    def is_initialized(self) -> bool:
        return self._table is not None

    def __len__(self) -> int:
        return len(self.initialize())

    def __contains__(self, token: object) -> bool:
        return token in self.initialize()

    def _build_table(self) -> Mapping[str, Command]:
        table: dict[str, Command] = {}
        collisions: list[tuple[str, str, str]] = []
        for command in self._commands:
            for binding in command.BINDINGS:
                existing = table.get(binding)
                if existing is not None:
                    collisions.append((binding, existing.name, command.name))
                    continue
                table[binding] = command
        if collisions:
            raise DuplicateBindingError(collisions)
        return MappingProxyType(table)
