"""Command Listing API: JSON form of the registry's descriptor list."""

from fastapi import APIRouter, Depends

from linkhop.api.dependencies import get_registry
from linkhop.core.registry import CommandRegistry
from linkhop.schemas.command import CommandDescriptorResponse

router = APIRouter(prefix="/api/v1/commands", tags=["commands"])


@router.get("", response_model=list[CommandDescriptorResponse])
async def list_commands(registry: CommandRegistry = Depends(get_registry)):
    return [
        CommandDescriptorResponse.from_descriptor(d)
        for d in registry.list_descriptors()
    ]
