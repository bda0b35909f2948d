"""Storage keys, stored values and ledger lifetime constants."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

DAY_IN_LEDGERS = 17280
INSTANCE_BUMP_AMOUNT = 7 * DAY_IN_LEDGERS
INSTANCE_LIFETIME_THRESHOLD = INSTANCE_BUMP_AMOUNT - DAY_IN_LEDGERS

BALANCE_BUMP_AMOUNT = 30 * DAY_IN_LEDGERS
BALANCE_LIFETIME_THRESHOLD = BALANCE_BUMP_AMOUNT - DAY_IN_LEDGERS


@dataclass(frozen=True)
class AllowanceDataKey:
    from_: Any
    spender: Any


@dataclass(frozen=True)
class AllowanceValue:
    amount: int
    expiration_ledger: int


class DataKeyKind(enum.Enum):
    ALLOWANCE = "Allowance"
    BALANCE = "Balance"
    NONCE = "Nonce"
    STATE = "State"
    ADMIN = "Admin"


@dataclass(frozen=True)
class DataKey:
    kind: DataKeyKind
    payload: Any = None

    @classmethod
    def allowance(cls, from_, spender):
        return cls(DataKeyKind.ALLOWANCE, AllowanceDataKey(from_, spender))

    @classmethod
    def balance(cls, addr):
        return cls(DataKeyKind.BALANCE, addr)

    @classmethod
    def nonce(cls, addr):
        return cls(DataKeyKind.NONCE, addr)

    @classmethod
    def state(cls, addr):
        return cls(DataKeyKind.STATE, addr)

    @classmethod
    def admin(cls):
        return cls(DataKeyKind.ADMIN)