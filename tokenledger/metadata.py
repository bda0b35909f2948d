"""Token metadata: decimals, name and symbol."""

from __future__ import annotations

from dataclasses import dataclass

from tokenledger.env import ContractError, Env

_METADATA_KEY = "METADATA"


@dataclass(frozen=True)
class TokenMetadata:
    """Descriptive data of a token."""

    decimal: int
    name: str
    symbol: str


def _read_metadata(e: Env) -> TokenMetadata:
    metadata = e.instance.get(_METADATA_KEY)
    if metadata is None:
        raise ContractError("token metadata is not set")
    return metadata


def read_decimal(e: Env) -> int:
    return _read_metadata(e).decimal


def read_name(e: Env) -> str:
    return _read_metadata(e).name


def read_symbol(e: Env) -> str:
    return _read_metadata(e).symbol


def write_metadata(e: Env, metadata: TokenMetadata) -> None:
    e.instance.set(_METADATA_KEY, metadata)