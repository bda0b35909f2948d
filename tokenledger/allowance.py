"""Allowances that let a spender move an owner's tokens until a given ledger."""

from __future__ import annotations

from typing import Hashable

from tokenledger.env import ContractError, Env
from tokenledger.storage_types import AllowanceValue, DataKey


def read_allowance(e: Env, from_: Hashable, spender: Hashable) -> AllowanceValue:
    """Current allowance; an expired one reads as zero."""
    allowance = e.temporary.get(DataKey.allowance(from_, spender))
    if allowance is None:
        return AllowanceValue(amount=0, expiration_ledger=0)
    if allowance.expiration_ledger < e.sequence:
        return AllowanceValue(amount=0, expiration_ledger=allowance.expiration_ledger)
    return allowance


def write_allowance(
    e: Env, from_: Hashable, spender: Hashable, amount: int, expiration_ledger: int
) -> None:
    if amount > 0 and expiration_ledger < e.sequence:
        raise ContractError("expiration_ledger is less than ledger seq when amount > 0")

    key = DataKey.allowance(from_, spender)
    e.temporary.set(key, AllowanceValue(amount, expiration_ledger))

    if amount > 0:
        live_for = expiration_ledger - e.sequence
        e.temporary.extend_ttl(key, live_for, live_for)


def spend_allowance(e: Env, from_: Hashable, spender: Hashable, amount: int) -> None:
    allowance = read_allowance(e, from_, spender)
    if allowance.amount < amount:
        raise ContractError("insufficient allowance")
    write_allowance(
        e, from_, spender, allowance.amount - amount, allowance.expiration_ledger
    )