"""Domain entities of the wallet: clients, accounts and transactions."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime


class ValidationError(ValueError):
    """Raised when an entity is in an invalid state."""


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(eq=False)
class Client:
    """A wallet client owning zero or more accounts."""

    name: str
    email: str
    id: str = field(default_factory=_new_id)
    accounts: list[Account] = field(default_factory=list, repr=False)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def validate(self) -> None:
        """Raise ValidationError unless name and email are present."""
        if not self.name:
            raise ValidationError("name is required")
        if not self.email:
            raise ValidationError("email is required")

    def update(self, name: str, email: str) -> None:
        """Change name and email, then validate the result."""
        self.name = name
        self.email = email
        self.updated_at = datetime.now()
        self.validate()

    def add_account(self, account: Account) -> None:
        """Attach an account that belongs to this client."""
        if account.client.id != self.id:
            raise ValidationError("account does not belong to this client")
        self.accounts.append(account)


@dataclass(eq=False)
class Account:
    """A balance held by a client."""

    client: Client
    id: str = field(default_factory=_new_id)
    client_id: str = ""
    balance: float = 0.0
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def credit(self, amount: float) -> None:
        """Add an amount to the balance."""
        self.balance += amount
        self.updated_at = datetime.now()

    def debit(self, amount: float) -> None:
        """Subtract an amount from the balance."""
        self.balance -= amount
        self.updated_at = datetime.now()


@dataclass(eq=False)
class Transaction:
    """A transfer of an amount from one account to another."""

    account_from: Account
    account_to: Account
    amount: float
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)

    def validate(self) -> None:
        """Raise ValidationError if the amount cannot be transferred."""
        if self.amount <= 0:
            raise ValidationError("amount must be greater than zero")
        if self.account_from.balance < self.amount:
            raise ValidationError("insuficient funds")

    def commit(self) -> None:
        """Move the amount between the two accounts."""
        self.account_from.debit(self.amount)
        self.account_to.credit(self.amount)


def new_client(name: str, email: str) -> Client:
    """Create a validated client."""
    client = Client(name=name, email=email)
    client.validate()
    return client


def new_account(client: Client | None) -> Account | None:
    """Create an empty account for a client; None when there is no client."""
    if client is None:
        return None
    return Account(client=client)


def new_transaction(
    account_from: Account, account_to: Account, amount: float
) -> Transaction:
    """Create a validated transaction and apply it to both accounts."""
    transaction = Transaction(
        account_from=account_from, account_to=account_to, amount=amount
    )
    transaction.validate()
    transaction.commit()
    return transaction