import pytest

from tokenledger.env import ContractError, Env
from tokenledger.metadata import (
    TokenMetadata,
    read_decimal,
    read_name,
    read_symbol,
    write_metadata,
)


def test_round_trip():
    env = Env()
    write_metadata(env, TokenMetadata(decimal=7, name="name", symbol="symbol"))
    assert read_decimal(env) == 7
    assert read_name(env) == "name"
    assert read_symbol(env) == "symbol"


def test_overwrite():
    env = Env()
    write_metadata(env, TokenMetadata(7, "name", "symbol"))
    write_metadata(env, TokenMetadata(10, "other", "OTH"))
    assert (read_decimal(env), read_name(env), read_symbol(env)) == (10, "other", "OTH")


@pytest.mark.parametrize("reader", [read_decimal, read_name, read_symbol])
def test_missing_metadata_fails(reader):
    with pytest.raises(ContractError, match="metadata"):
        reader(Env())