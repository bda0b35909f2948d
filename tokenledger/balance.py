"""Account balances kept in persistent storage."""

from __future__ import annotations

from typing import Hashable

from tokenledger.env import ContractError, Env
from tokenledger.storage_types import (
    BALANCE_BUMP_AMOUNT,
    BALANCE_LIFETIME_THRESHOLD,
    DataKey,
)

_I128_MIN = -(2**127)
_I128_MAX = 2**127 - 1


def read_balance(e: Env, addr: Hashable) -> int:
    key = DataKey.balance(addr)
    balance = e.persistent.get(key)
    if balance is None:
        return 0
    e.persistent.extend_ttl(key, BALANCE_LIFETIME_THRESHOLD, BALANCE_BUMP_AMOUNT)
    return balance


def _write_balance(e: Env, addr: Hashable, amount: int) -> None:
    if not _I128_MIN <= amount <= _I128_MAX:
        raise ContractError("arithmetic overflow")
    key = DataKey.balance(addr)
    e.persistent.set(key, amount)
    e.persistent.extend_ttl(key, BALANCE_LIFETIME_THRESHOLD, BALANCE_BUMP_AMOUNT)


def receive_balance(e: Env, addr: Hashable, amount: int) -> None:
    _write_balance(e, addr, read_balance(e, addr) + amount)


def spend_balance(e: Env, addr: Hashable, amount: int) -> None:
    balance = read_balance(e, addr)
    if balance < amount:
        raise ContractError("insufficient balance")
    _write_balance(e, addr, balance - amount)