"""Search Route: GET /?cmd=... resolves a command and answers with a 303 redirect.

Invariants:
    - Without cmd, the landing page is rendered (never an error page)
    - Redirect is always delivered; history recording runs afterwards as a
      background task and cannot fail the request
    - The raw command (pre-alias) is what gets recorded

Design Decisions:
    - Logging lives here, not in the router: the core stays a pure function
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from fastapi.responses import RedirectResponse, Response

from linkhop.api.dependencies import get_registry, get_router
from linkhop.api.routes.landing import landing_response
from linkhop.config import Settings, get_settings
from linkhop.core.registry import CommandRegistry
from linkhop.core.router import Router
from linkhop.services.history import UNKNOWN_CLIENT, record_command

logger = logging.getLogger(__name__)
router = APIRouter(tags=["search"])


def _client_identifier(request: Request) -> str:
    return request.client.host if request.client else UNKNOWN_CLIENT


@router.get("/", response_model=None)
async def search(
    request: Request,
    background_tasks: BackgroundTasks,
    cmd: str | None = None,
    command_router: Router = Depends(get_router),
    registry: CommandRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Resolve cmd into a destination URL and redirect to it."""
    if cmd is None:
        return landing_response(registry, settings)

    resolved = command_router.route(cmd, settings)
    client = _client_identifier(request)
    logger.info(
        f"linkhop command: {cmd} -> {resolved.destination_url}",
        extra={
            "command": cmd,
            "destination": resolved.destination_url,
            "client": client,
        },
    )

    if settings.history.enabled:
        background_tasks.add_task(
            record_command, cmd, client, settings.history.max_entries,
        )

    return RedirectResponse(
        resolved.destination_url, status_code=status.HTTP_303_SEE_OTHER,
    )
