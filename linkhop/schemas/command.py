"""Command listing schema."""

from pydantic import BaseModel

from linkhop.core.domain_types import CommandDescriptor


class CommandDescriptorResponse(BaseModel):
    bindings: list[str]
    description: str
    example: str

    @classmethod
    def from_descriptor(cls, descriptor: CommandDescriptor) -> "CommandDescriptorResponse":
        return cls(
            bindings=list(descriptor.bindings),
            description=descriptor.description,
            example=descriptor.example,
        )
