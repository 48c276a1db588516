"""Request Dependencies: access to the per-app registry and router.

Invariants:
    - The registry/router live on app.state (set once in main.py), never in module globals
"""

from fastapi import Request

from linkhop.core.registry import CommandRegistry
from linkhop.core.router import Router


def get_router(request: Request) -> Router:
    return request.app.state.router


def get_registry(request: Request) -> CommandRegistry:
    return request.app.state.registry
