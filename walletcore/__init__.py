"""Wallet core: clients, accounts and transfers, with SQL-backed gateways and use cases."""

__version__ = "0.1.0"

__all__ = [
    "entity",
    "gateway",
    "database",
    "create_account",
    "create_client",
    "create_transaction",
]