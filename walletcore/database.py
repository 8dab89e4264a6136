"""SQL-backed gateways over a DB-API connection such as sqlite3."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from walletcore.entity import Account, Client, Transaction
from walletcore.gateway import AccountGateway, ClientGateway, TransactionGateway


class NotFoundError(LookupError):
    """Raised when a requested row does not exist."""


def _to_db_time(value: datetime) -> str:
    return value.isoformat()


def _from_db_time(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bytes):
        value = value.decode()
    return datetime.fromisoformat(str(value))


class AccountDB(AccountGateway):
    """Accounts stored in the ``accounts`` table, joined with ``clients``."""

    _FIND_SQL = (
        "SELECT a.id, a.client_id, a.balance, a.created_at, "
        "c.id, c.name, c.email, c.created_at "
        "FROM accounts a INNER JOIN clients c ON a.client_id = c.id "
        "WHERE a.id = ?"
    )
    _SAVE_SQL = (
        "INSERT INTO accounts (id, client_id, balance, created_at) "
        "VALUES (?, ?, ?, ?)"
    )

    def __init__(self, db: Any) -> None:
        self.db = db

    def find_by_id(self, account_id: str) -> Account:
        """Return the account with its client, or raise NotFoundError."""
        row = self.db.execute(self._FIND_SQL, (account_id,)).fetchone()
        if row is None:
            raise NotFoundError(f"account {account_id!r} not found")
        (
            acc_id,
            _client_ref,
            balance,
            acc_created,
            client_id,
            client_name,
            client_email,
            client_created,
        ) = row
        client = Client(
            name=client_name,
            email=client_email,
            id=client_id,
            created_at=_from_db_time(client_created),
        )
        return Account(
            client=client,
            id=acc_id,
            balance=float(balance),
            created_at=_from_db_time(acc_created),
        )

    def save(self, account: Account) -> None:
        """Insert a new account row."""
        with self.db:
            self.db.execute(
                self._SAVE_SQL,
                (
                    account.id,
                    account.client.id,
                    account.balance,
                    _to_db_time(account.created_at),
                ),
            )


class ClientDB(ClientGateway):
    """Clients stored in the ``clients`` table."""

    _GET_SQL = "SELECT id, name, email, created_at FROM clients WHERE id = ?"
    _SAVE_SQL = (
        "INSERT INTO clients (id, name, email, created_at) VALUES (?, ?, ?, ?)"
    )

    def __init__(self, db: Any) -> None:
        self.db = db

    def get(self, client_id: str) -> Client:
        """Return the client with the given id, or raise NotFoundError."""
        row = self.db.execute(self._GET_SQL, (client_id,)).fetchone()
        if row is None:
            raise NotFoundError(f"client {client_id!r} not found")
        found_id, name, email, created_at = row
        return Client(
            name=name,
            email=email,
            id=found_id,
            created_at=_from_db_time(created_at),
        )

    def save(self, client: Client) -> None:
        """Insert a new client row."""
        with self.db:
            self.db.execute(
                self._SAVE_SQL,
                (client.id, client.name, client.email, _to_db_time(client.created_at)),
            )


class TransactionDB(TransactionGateway):
    """Transactions stored in the ``transactions`` table."""

    _CREATE_SQL = (
        "INSERT INTO transactions "
        "(id, account_id_from, account_id_to, amount, created_at) "
        "VALUES (?, ?, ?, ?, ?)"
    )

    def __init__(self, db: Any) -> None:
        self.db = db

    def create(self, transaction: Transaction) -> None:
        """Insert a new transaction row."""
        with self.db:
            self.db.execute(
                self._CREATE_SQL,
                (
                    transaction.id,
                    transaction.account_from.id,
                    transaction.account_to.id,
                    transaction.amount,
                    _to_db_time(transaction.created_at),
                ),
            )