"""Landing & Bindings Pages: HTML listing of every command and alias.

Invariants:
    - GET /bindings always renders the listing (200)
    - landing_response() is shared by the search route (no cmd) and the 404 handler
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse

from linkhop.api.dependencies import get_registry
from linkhop.config import Settings, get_settings
from linkhop.core.registry import CommandRegistry
from linkhop.services.landing_page import render_landing_page

router = APIRouter(tags=["landing"])


def landing_response(
    registry: CommandRegistry,
    settings: Settings,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    html = render_landing_page(
        registry.list_descriptors(),
        search_label=settings.search_label,
        aliases=settings.aliases,
    )
    return HTMLResponse(html, status_code=status_code)


@router.get("/bindings", response_class=HTMLResponse)
async def bindings_page(
    registry: CommandRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
):
    """Full command listing."""
    return landing_response(registry, settings)


def not_found_page(request: Request) -> HTMLResponse:
    """Landing page served with a 404 status for unknown paths."""
    return landing_response(
        request.app.state.registry, get_settings(), status.HTTP_404_NOT_FOUND,
    )
