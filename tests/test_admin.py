import pytest

from tokenledger.admin import has_administrator, read_administrator, write_administrator
from tokenledger.env import ContractError, Env


def test_missing_administrator():
    env = Env()
    assert has_administrator(env) is False
    with pytest.raises(ContractError):
        read_administrator(env)


@pytest.mark.parametrize("writes", [1, 2])
def test_latest_written_administrator_is_read(writes):
    env = Env()
    admins = [env.generate_address() for _ in range(writes)]
    for admin in admins:
        write_administrator(env, admin)
    assert has_administrator(env) is True
    assert read_administrator(env) == admins[-1]