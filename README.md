# walletcore

The core of a digital wallet. It models clients, their accounts and transfers
between accounts. Gateway classes store them in SQL tables through a DB-API
connection such as `sqlite3`.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Domain model

`walletcore.entity` holds the domain objects:

- `new_client(name, email)` creates a `Client`. It raises `ValidationError`
  when the name or the e-mail is empty.
- `Client.update(name, email)` changes both fields and validates them again.
- `Client.add_account(account)` attaches an account. It raises
  `ValidationError` if the account belongs to another client.
- `new_account(client)` opens an `Account` with a zero balance for a client.
  It returns `None` if no client is given.
- `Account.credit(amount)` and `Account.debit(amount)` change the balance.
- `new_transaction(account_from, account_to, amount)` checks the transfer and
  applies it at once. It raises `ValidationError` if the amount is not positive
  or the source account has too little money. A failed transfer leaves both
  balances as they were.

```python
from walletcore.entity import new_client, new_account, new_transaction

alice = new_client("Alice", "alice@example.com")
bob = new_client("Bob", "bob@example.com")

source = new_account(alice)
target = new_account(bob)
source.credit(1000)

new_transaction(source, target, 100)
print(source.balance, target.balance)  # 900.0 100.0
```

## Persistence

`walletcore.gateway` defines the abstract storage interfaces `ClientGateway`,
`AccountGateway` and `TransactionGateway`. `walletcore.database` implements
them on a connection object as `ClientDB`, `AccountDB` and `TransactionDB`:

- `ClientDB.save(client)` and `ClientDB.get(client_id)`
- `AccountDB.save(account)` and `AccountDB.find_by_id(account_id)`, which
  also loads the account's client
- `TransactionDB.create(transaction)`

A lookup that finds no row raises `NotFoundError`. Timestamps are written as
ISO 8601 text.

## Use cases

Each use case takes its gateways when it is built and has a single
`execute(data)` method:

- `CreateClientUseCase(client_gateway)` with `CreateClientInput(name, email)`
  returns a `CreateClientOutput` with the client's id, name, e-mail and
  timestamps.
- `CreateAccountUseCase(account_gateway, client_gateway)` with
  `CreateAccountInput(client_id)` returns a `CreateAccountOutput` that holds the
  new account's id.
- `CreateTransactionUseCase(transaction_gateway, account_gateway)` with
  `CreateTransactionInput(account_id_from, account_id_to, amount)` returns a
  `CreateTransactionOutput` that holds the transaction's id.

```python
import sqlite3

from walletcore.database import ClientDB
from walletcore.create_client import CreateClientInput, CreateClientUseCase

conn = sqlite3.connect(":memory:")
conn.execute(
    "CREATE TABLE clients (id varchar(255), name varchar(255), "
    "email varchar(255), created_at date)"
)

use_case = CreateClientUseCase(ClientDB(conn))
output = use_case.execute(CreateClientInput(name="Alice", email="alice@example.com"))
print(output.id, output.name)
```

## What it does not do

walletcore is a library only. It has no command-line tool and no HTTP server.
It does not create the `clients`, `accounts` and `transactions` tables; they
must exist before the database gateways are used. It does not write updated
account balances back to storage after a transfer: `TransactionDB` records the
transaction row only.