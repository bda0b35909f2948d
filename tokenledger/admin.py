"""The token administrator record."""

from __future__ import annotations

from tokenledger.env import Address, ContractError, Env
from tokenledger.storage_types import DataKey


def has_administrator(e: Env) -> bool:
    return e.instance.has(DataKey.admin())


def read_administrator(e: Env) -> Address:
    admin = e.instance.get(DataKey.admin())
    if admin is None:
        raise ContractError("administrator is not set")
    return admin


def write_administrator(e: Env, admin: Address) -> None:
    e.instance.set(DataKey.admin(), admin)