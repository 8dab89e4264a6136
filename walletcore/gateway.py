"""Storage interfaces the use cases depend on."""

from __future__ import annotations

from abc import ABC, abstractmethod

from walletcore.entity import Account, Client, Transaction


class AccountGateway(ABC):
    """Persistence of accounts."""

    @abstractmethod
    def save(self, account: Account) -> None:
        """Store an account."""

    @abstractmethod
    def find_by_id(self, account_id: str) -> Account:
        """Return the account with the given id, raising if absent."""


class ClientGateway(ABC):
    """Persistence of clients."""

    @abstractmethod
    def get(self, client_id: str) -> Client:
        """Return the client with the given id, raising if absent."""

    @abstractmethod
    def save(self, client: Client) -> None:
        """Store a client."""


class TransactionGateway(ABC):
    """Persistence of transactions."""

    @abstractmethod
    def create(self, transaction: Transaction) -> None:
        """Store a new transaction."""