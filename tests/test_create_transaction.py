from unittest.mock import create_autospec

import pytest

from walletcore.create_transaction import (
    CreateTransactionInput,
    CreateTransactionUseCase,
)
from walletcore.entity import ValidationError, new_account, new_client
from walletcore.gateway import AccountGateway, TransactionGateway


@pytest.fixture
def accounts():
    account1 = new_account(new_client("client1", "client1@example.com"))
    account1.credit(1000)
    account2 = new_account(new_client("client2", "client2@example.com"))
    account2.credit(1000)
    return account1, account2


def _account_gateway(*accounts):
    by_id = {account.id: account for account in accounts}
    gateway = create_autospec(AccountGateway, instance=True)
    gateway.find_by_id.side_effect = lambda account_id: by_id[account_id]
    return gateway


def test_execute_transfers(accounts):
    account1, account2 = accounts
    account_gateway = _account_gateway(account1, account2)
    transaction_gateway = create_autospec(TransactionGateway, instance=True)

    uc = CreateTransactionUseCase(transaction_gateway, account_gateway)
    output = uc.execute(
        CreateTransactionInput(
            account_id_from=account1.id, account_id_to=account2.id, amount=100
        )
    )

    assert output.id
    assert account_gateway.find_by_id.call_count == 2
    assert transaction_gateway.create.call_count == 1
    recorded = transaction_gateway.create.call_args.args[0]
    assert recorded.id == output.id
    assert account1.balance == 900.0
    assert account2.balance == 1100.0


def test_execute_insufficient_funds(accounts):
    account1, account2 = accounts
    account_gateway = _account_gateway(account1, account2)
    transaction_gateway = create_autospec(TransactionGateway, instance=True)

    uc = CreateTransactionUseCase(transaction_gateway, account_gateway)
    with pytest.raises(ValidationError, match="insuficient funds"):
        uc.execute(
            CreateTransactionInput(
                account_id_from=account1.id, account_id_to=account2.id, amount=2000
            )
        )
    assert transaction_gateway.create.call_count == 0
    assert account1.balance == 1000.0
    assert account2.balance == 1000.0


def test_execute_missing_account(accounts):
    account1, _ = accounts
    account_gateway = _account_gateway(account1)
    transaction_gateway = create_autospec(TransactionGateway, instance=True)

    uc = CreateTransactionUseCase(transaction_gateway, account_gateway)
    with pytest.raises(KeyError):
        uc.execute(
            CreateTransactionInput(
                account_id_from=account1.id, account_id_to="missing", amount=10
            )
        )
    assert transaction_gateway.create.call_count == 0