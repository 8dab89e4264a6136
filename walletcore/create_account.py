"""Use case: open a new account for an existing client."""

from __future__ import annotations

from dataclasses import dataclass

from walletcore.entity import new_account
from walletcore.gateway import AccountGateway, ClientGateway


@dataclass(frozen=True)
class CreateAccountInput:
    """Request to open an account."""

    client_id: str


@dataclass(frozen=True)
class CreateAccountOutput:
    """Identifier of the newly opened account."""

    id: str


class CreateAccountUseCase:
    """Look up a client and store a fresh account for it."""

    def __init__(
        self, account_gateway: AccountGateway, client_gateway: ClientGateway
    ) -> None:
        self.account_gateway = account_gateway
        self.client_gateway = client_gateway

    def execute(self, data: CreateAccountInput) -> CreateAccountOutput:
        """Create and save the account, returning its id."""
        client = self.client_gateway.get(data.client_id)
        account = new_account(client)
        self.account_gateway.save(account)
        return CreateAccountOutput(id=account.id)