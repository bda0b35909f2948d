import pytest

from tokenledger.storage_types import (
    AllowanceDataKey,
    AllowanceValue,
    DataKey,
    DataKeyKind,
)


def test_allowance_key_carries_both_addresses():
    key = DataKey.allowance("alice", "bob")
    assert key.kind is DataKeyKind.ALLOWANCE
    assert key.payload == AllowanceDataKey("alice", "bob")


def test_allowance_key_is_directional():
    assert DataKey.allowance("alice", "bob") != DataKey.allowance("bob", "alice")


@pytest.mark.parametrize(
    "factory, kind",
    [
        (DataKey.balance, DataKeyKind.BALANCE),
        (DataKey.nonce, DataKeyKind.NONCE),
        (DataKey.state, DataKeyKind.STATE),
    ],
)
def test_address_keys(factory, kind):
    key = factory("alice")
    assert key.kind is kind
    assert key.payload == "alice"
    assert factory("alice") == key
    assert factory("bob") != key


def test_kinds_with_same_address_differ():
    keys = {DataKey.balance("a"), DataKey.nonce("a"), DataKey.state("a")}
    assert len(keys) == 3


def test_admin_key_is_singleton_value():
    assert DataKey.admin() == DataKey.admin()
    assert DataKey.admin().kind is DataKeyKind.ADMIN
    assert DataKey.admin().payload is None


def test_keys_work_as_dict_keys():
    table = {DataKey.balance("a"): 1, DataKey.allowance("a", "b"): 2}
    assert table[DataKey.balance("a")] == 1
    assert table[DataKey.allowance("a", "b")] == 2


def test_allowance_value_is_immutable():
    value = AllowanceValue(amount=10, expiration_ledger=20)
    with pytest.raises(AttributeError):
        value.amount = 5
    assert value == AllowanceValue(10, 20)