"""In-memory fungible token ledger with balances, allowances, admin-controlled minting and events."""

__version__ = "0.0.6"