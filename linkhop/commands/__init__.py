"""Command Catalogue: concrete command handlers, one module per family.

Invariants:
    - Every handler subclasses core.command.Command
    - catalog.ALL_COMMANDS is the single ordered list the registry is built from

Design Decisions:
    - Explicit imports in catalog.py, no auto-discovery: adding a command means
      editing ALL_COMMANDS
"""
