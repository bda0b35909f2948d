"""The token contract: administration, balances, allowances and metadata."""

from __future__ import annotations

import copy
from contextlib import contextmanager

from tokenledger.admin import has_administrator, read_administrator, write_administrator
from tokenledger.allowance import read_allowance, spend_allowance, write_allowance
from tokenledger.balance import read_balance, receive_balance, spend_balance
from tokenledger.env import ContractError
from tokenledger.metadata import (
    TokenMetadata,
    read_decimal,
    read_name,
    read_symbol,
    write_metadata,
)
from tokenledger.storage_types import INSTANCE_BUMP_AMOUNT, INSTANCE_LIFETIME_THRESHOLD

_U8_MAX = 0xFF


def _check_nonnegative_amount(amount):
    if amount < 0:
        raise ContractError(f"negative amount is not allowed: {amount}")


class Token:
    """A fungible token on an Env; a call that raises leaves storage unchanged."""

    def __init__(self, env):
        self.env = env
        self.address = env.generate_address()

    @contextmanager
    def _invocation(self):
        e = self.env
        e.begin_invocation()
        snapshot = copy.deepcopy((e.instance, e.persistent, e.temporary))
        try:
            yield e
        except BaseException:
            e.instance, e.persistent, e.temporary = snapshot
            raise

    def _extend_instance(self):
        self.env.extend_instance_ttl(INSTANCE_LIFETIME_THRESHOLD, INSTANCE_BUMP_AMOUNT)

    def _authorize(self, address, function, args, amount=0):
        self.env.require_auth(address, self.address, function, args)
        _check_nonnegative_amount(amount)
        self._extend_instance()

    def _move(self, e, from_, to, amount):
        spend_balance(e, from_, amount)
        receive_balance(e, to, amount)
        e.publish_event(("transfer", from_, to), amount)

    def _destroy(self, e, from_, amount):
        spend_balance(e, from_, amount)
        e.publish_event(("burn", from_), amount)

    def initialize(self, admin, decimal, name, symbol):
        with self._invocation() as e:
            if has_administrator(e):
                raise ContractError("already initialized")
            write_administrator(e, admin)
            if not 0 <= decimal <= _U8_MAX:
                raise ContractError("Decimal must fit in a u8")
            write_metadata(e, TokenMetadata(decimal=decimal, name=name, symbol=symbol))

    def mint(self, to, amount):
        with self._invocation() as e:
            _check_nonnegative_amount(amount)
            admin = read_administrator(e)
            self._authorize(admin, "mint", (to, amount), amount)
            receive_balance(e, to, amount)
            e.publish_event(("mint", admin, to), amount)

    def set_admin(self, new_admin):
        with self._invocation() as e:
            admin = read_administrator(e)
            self._authorize(admin, "set_admin", (new_admin,))
            write_administrator(e, new_admin)
            e.publish_event(("set_admin", admin), new_admin)

    def allowance(self, from_, spender):
        with self._invocation() as e:
            self._extend_instance()
            return read_allowance(e, from_, spender).amount

    def approve(self, from_, spender, amount, expiration_ledger):
        with self._invocation() as e:
            self._authorize(from_, "approve", (from_, spender, amount, expiration_ledger), amount)
            write_allowance(e, from_, spender, amount, expiration_ledger)
            e.publish_event(("approve", from_, spender), (amount, expiration_ledger))

    def balance(self, id_):
        with self._invocation() as e:
            self._extend_instance()
            return read_balance(e, id_)

    def transfer(self, from_, to, amount):
        with self._invocation() as e:
            self._authorize(from_, "transfer", (from_, to, amount), amount)
            self._move(e, from_, to, amount)

    def transfer_from(self, spender, from_, to, amount):
        with self._invocation() as e:
            self._authorize(spender, "transfer_from", (spender, from_, to, amount), amount)
            spend_allowance(e, from_, spender, amount)
            self._move(e, from_, to, amount)

    def burn(self, from_, amount):
        with self._invocation() as e:
            self._authorize(from_, "burn", (from_, amount), amount)
            self._destroy(e, from_, amount)

    def burn_from(self, spender, from_, amount):
        with self._invocation() as e:
            self._authorize(spender, "burn_from", (spender, from_, amount), amount)
            spend_allowance(e, from_, spender, amount)
            self._destroy(e, from_, amount)

    def decimals(self):
        with self._invocation() as e:
            return read_decimal(e)

    def name(self):
        with self._invocation() as e:
            return read_name(e)

    def symbol(self):
        with self._invocation() as e:
            return read_symbol(e)