from unittest.mock import ANY, create_autospec

import pytest

from walletcore.create_account import (
    CreateAccountInput,
    CreateAccountOutput,
    CreateAccountUseCase,
)
from walletcore.entity import new_client
from walletcore.gateway import AccountGateway, ClientGateway


def test_execute_creates_account():
    client = new_client("John Doe", "john@example.com")
    client_gateway = create_autospec(ClientGateway, instance=True)
    client_gateway.get.return_value = client
    account_gateway = create_autospec(AccountGateway, instance=True)

    uc = CreateAccountUseCase(account_gateway, client_gateway)
    output = uc.execute(CreateAccountInput(client_id=client.id))

    assert isinstance(output, CreateAccountOutput)
    assert output.id
    client_gateway.get.assert_called_once_with(client.id)
    account_gateway.save.assert_called_once_with(ANY)
    saved = account_gateway.save.call_args.args[0]
    assert saved.id == output.id
    assert saved.client is client
    assert saved.balance == 0


def test_execute_propagates_lookup_error():
    client_gateway = create_autospec(ClientGateway, instance=True)
    client_gateway.get.side_effect = LookupError("no client")
    account_gateway = create_autospec(AccountGateway, instance=True)

    uc = CreateAccountUseCase(account_gateway, client_gateway)
    with pytest.raises(LookupError, match="no client"):
        uc.execute(CreateAccountInput(client_id="x"))
    assert account_gateway.save.call_count == 0


def test_execute_propagates_save_error():
    client = new_client("John Doe", "john@example.com")
    client_gateway = create_autospec(ClientGateway, instance=True)
    client_gateway.get.return_value = client
    account_gateway = create_autospec(AccountGateway, instance=True)
    account_gateway.save.side_effect = RuntimeError("disk full")

    uc = CreateAccountUseCase(account_gateway, client_gateway)
    with pytest.raises(RuntimeError, match="disk full"):
        uc.execute(CreateAccountInput(client_id=client.id))