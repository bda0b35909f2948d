# tokenledger

A self-contained fungible token ledger that runs in memory. It keeps
balances and spending allowances and lets only an administrator mint. It
records which address authorised each call and publishes an event for every
change of state. Storage entries have a time to live, counted in ledgers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from tokenledger.env import Env
from tokenledger.contract import Token

env = Env()              # ledger sequence starts at 0
env.mock_all_auths()     # treat every required authorisation as given

admin = env.generate_address()
alice = env.generate_address()
bob = env.generate_address()
carol = env.generate_address()

token = Token(env)
token.initialize(admin, 7, "name", "symbol")

token.mint(alice, 1000)
token.transfer(alice, bob, 600)

token.approve(bob, carol, 500, 200)          # allowance valid until ledger 200
token.transfer_from(carol, bob, alice, 400)  # carol spends bob's allowance

assert token.balance(alice) == 800
assert token.balance(bob) == 200
assert token.allowance(bob, carol) == 100

token.burn(alice, 300)
token.set_admin(carol)
```

Each `Token` call starts a new invocation. After a call, `env.auths()` lists
the `(address, AuthorizedInvocation)` pairs that the call required.
`env.events()` lists the `Event` records it published. These are the events:

| call                          | topics                       | data                          |
|-------------------------------|------------------------------|-------------------------------|
| `mint`                        | `("mint", admin, to)`        | amount                        |
| `set_admin`                   | `("set_admin", admin)`       | new admin                     |
| `approve`                     | `("approve", from, spender)` | `(amount, expiration_ledger)` |
| `transfer`, `transfer_from`   | `("transfer", from, to)`     | amount                        |
| `burn`, `burn_from`           | `("burn", from)`             | amount                        |

To move time forward, assign to `env.sequence`.

## Behaviour

- `initialize` can run only once. `decimal` must be between 0 and 255.
- `mint` and `set_admin` need the current administrator's authorisation.
- `transfer`, `approve` and `burn` need the owner's authorisation.
  `transfer_from` and `burn_from` need the spender's authorisation and use up
  the spender's allowance.
- Negative amounts are rejected. So are spending more than the balance or
  the allowance, and a balance outside the signed 128-bit range.
- An allowance reads as zero once the ledger sequence passes its expiration
  ledger. Approving a positive amount with an expiration ledger that has
  already passed is an error.
- Every rejected call raises `tokenledger.env.ContractError`. Without
  `env.mock_all_auths()`, a call that needs authorisation raises
  `tokenledger.env.AuthError`, a subclass of `ContractError`. A call that
  raises leaves storage as it was.
- `Env` has three `Storage` areas: `instance`, `persistent` and `temporary`.
  A temporary entry whose time to live has run out is dropped. An instance or
  persistent entry whose time to live has run out is archived, and reading it
  raises `ContractError`. Balances are kept alive for 30 days of ledgers
  (17280 ledgers a day). Contract instance data is kept alive for 7 days.
  Allowances are kept alive until their expiration ledger.

## Modules

- `tokenledger.env`: `Env`, `Address`, `Storage`, `AuthorizedInvocation`,
  `Event`, `ContractError` and `AuthError`.
- `tokenledger.storage_types`: `DataKey`, `DataKeyKind`, `AllowanceDataKey`,
  `AllowanceValue` and the lifetime constants.
- `tokenledger.admin`, `tokenledger.balance`, `tokenledger.allowance` and
  `tokenledger.metadata`: storage helpers for each part of the ledger.
  `tokenledger.metadata` also provides `TokenMetadata`.
- `tokenledger.contract`: the `Token` interface.

## What it does not do

The ledger exists only in the memory of the Python process. Nothing is saved
to disk or shared across processes, and the package provides no command-line
tool or network service. Authorisation is either fully mocked or refused.
Signatures are not checked.