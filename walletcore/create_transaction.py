"""Use case: transfer an amount between two accounts."""

from __future__ import annotations

from dataclasses import dataclass

from walletcore.entity import new_transaction
from walletcore.gateway import AccountGateway, TransactionGateway


@dataclass(frozen=True)
class CreateTransactionInput:
    """Request to transfer an amount."""

    account_id_from: str
    account_id_to: str
    amount: float


@dataclass(frozen=True)
class CreateTransactionOutput:
    """Identifier of the recorded transaction."""

    id: str


class CreateTransactionUseCase:
    """Load both accounts, apply the transfer and record it."""

    def __init__(
        self,
        transaction_gateway: TransactionGateway,
        account_gateway: AccountGateway,
    ) -> None:
        self.transaction_gateway = transaction_gateway
        self.account_gateway = account_gateway

    def execute(self, data: CreateTransactionInput) -> CreateTransactionOutput:
        """Perform the transfer and return the transaction id."""
        account_from = self.account_gateway.find_by_id(data.account_id_from)
        account_to = self.account_gateway.find_by_id(data.account_id_to)
        transaction = new_transaction(account_from, account_to, data.amount)
        self.transaction_gateway.create(transaction)
        return CreateTransactionOutput(id=transaction.id)