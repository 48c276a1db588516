"""Command Catalogue: the ordered command list, prefix rules and their assembly.

Invariants:
    - ALL_COMMANDS order is the presentation order of the landing page
    - No two commands share a binding (enforced by CommandRegistry at build time)
    - "$" prefix rule dispatches to STOCK_COMMAND

Design Decisions:
    - Explicit imports from each define_*_commands.py: every command visible here
    - build_registry()/build_router() return new objects, never a cached global
"""

from linkhop.commands.define_developer_commands import COMMANDS_DEVELOPER
from linkhop.commands.define_finance_ai_commands import (
    COMMANDS_FINANCE_AI, STOCK_COMMAND, TICKER_SENTINEL,
)
from linkhop.commands.define_general_commands import COMMANDS_GENERAL
from linkhop.commands.define_social_commands import COMMANDS_SOCIAL
from linkhop.commands.define_workspace_commands import COMMANDS_WORKSPACE
from linkhop.core.command import Command
from linkhop.core.prefix_dispatch import PrefixDispatcher, PrefixRule
from linkhop.core.registry import CommandRegistry
from linkhop.core.router import Router

ALL_COMMANDS: tuple[Command, ...] = (
    *COMMANDS_GENERAL,       # 10 commands
    *COMMANDS_SOCIAL,        # 10 commands
    *COMMANDS_WORKSPACE,     # 5 commands
    *COMMANDS_DEVELOPER,     # 17 commands
    *COMMANDS_FINANCE_AI,    # 5 commands
)
# Total: 47

PREFIX_RULES: tuple[PrefixRule, ...] = (
    PrefixRule(TICKER_SENTINEL, STOCK_COMMAND.process_ticker),
)


def build_registry() -> CommandRegistry:
    return CommandRegistry(ALL_COMMANDS)


def build_router(registry: CommandRegistry | None = None) -> Router:
    """Router over the full catalogue with the standard prefix rules."""
    if registry is None:
        registry = build_registry()
    return Router(registry, PrefixDispatcher(PREFIX_RULES))
