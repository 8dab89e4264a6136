"""Use case: register a new client."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from walletcore.entity import new_client
from walletcore.gateway import ClientGateway


@dataclass(frozen=True)
class CreateClientInput:
    """Request to register a client."""

    name: str
    email: str


@dataclass(frozen=True)
class CreateClientOutput:
    """The registered client's data."""

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class CreateClientUseCase:
    """Validate and store a new client."""

    def __init__(self, client_gateway: ClientGateway) -> None:
        self.client_gateway = client_gateway

    def execute(self, data: CreateClientInput) -> CreateClientOutput:
        """Create and save the client, returning its data."""
        client = new_client(data.name, data.email)
        self.client_gateway.save(client)
        return CreateClientOutput(
            id=client.id,
            name=client.name,
            email=client.email,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )