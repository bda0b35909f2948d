"""An in-memory ledger: storage with lifetimes, authorization and events."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any


class ContractError(Exception):
    """Raised when a contract operation is rejected."""


class AuthError(ContractError):
    """Raised when a required authorization has not been given."""


@dataclass(frozen=True)
class Address:
    value: str


@dataclass(frozen=True)
class AuthorizedInvocation:
    contract: Address
    function: str
    args: tuple
    sub_invocations: tuple = ()


@dataclass(frozen=True)
class Event:
    topics: tuple
    data: Any


class Storage:
    """Entries live until a given ledger; expired temporary ones vanish, others are archived."""

    def __init__(self, sequence, min_ttl, *, temporary=False):
        self._sequence = sequence
        self._min_ttl = min_ttl
        self._temporary = temporary
        self._entries = {}  # key -> [value, live_until]

    def _live(self, key):
        entry = self._entries.get(key)
        if entry is None or entry[1] >= self._sequence():
            return entry
        if not self._temporary:
            raise ContractError(f"entry is archived: {key!r}")
        del self._entries[key]
        return None

    def __iter__(self):
        now = self._sequence()
        return iter([k for k, e in self._entries.items() if e[1] >= now])

    def has(self, key):
        return self._live(key) is not None

    def get(self, key, default=None):
        entry = self._live(key)
        return default if entry is None else entry[0]

    def set(self, key, value):
        entry = self._live(key)
        if entry is None:
            self._entries[key] = [value, self._sequence() + self._min_ttl - 1]
        else:
            entry[0] = value

    def remove(self, key):
        if self._live(key) is not None:
            del self._entries[key]

    def extend_ttl(self, key, threshold, extend_to):
        """Make the entry live ``extend_to`` ledgers if its TTL is at most ``threshold``."""
        if threshold > extend_to:
            raise ContractError("threshold must not exceed extend_to")
        entry = self._live(key)
        if entry is None:
            raise ContractError(f"missing entry: {key!r}")
        now = self._sequence()
        if entry[1] - now <= threshold:
            entry[1] = max(entry[1], now + extend_to)

    def ttl(self, key):
        """Ledgers after the current one for which the entry stays live."""
        entry = self._live(key)
        if entry is None:
            raise KeyError(key)
        return entry[1] - self._sequence()


class Env:
    """The ledger a contract runs against."""

    def __init__(self, sequence=0, *, min_temporary_ttl=16, min_persistent_ttl=4096):
        self.sequence = sequence

        def current():
            return self.sequence

        self.instance = Storage(current, min_persistent_ttl)
        self.persistent = Storage(current, min_persistent_ttl)
        self.temporary = Storage(current, min_temporary_ttl, temporary=True)
        self._auths_mocked = False
        self._auths = []
        self._events = []
        self._address_ids = itertools.count(1)

    def generate_address(self):
        return Address(f"ADDR{next(self._address_ids)}")

    def mock_all_auths(self):
        self._auths_mocked = True

    def require_auth(self, address, contract, function, args):
        if not self._auths_mocked:
            raise AuthError(f"{address.value} has not authorized {function}")
        self._auths.append((address, AuthorizedInvocation(contract, function, tuple(args))))

    def auths(self):
        """Authorizations recorded during the latest invocation."""
        return list(self._auths)

    def begin_invocation(self):
        self._auths.clear()
        self._events.clear()

    def publish_event(self, topics, data):
        self._events.append(Event(tuple(topics), data))

    def events(self):
        """Events published during the latest invocation."""
        return list(self._events)

    def extend_instance_ttl(self, threshold, extend_to):
        for key in list(self.instance):
            self.instance.extend_ttl(key, threshold, extend_to)