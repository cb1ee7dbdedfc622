# blogchain

`blogchain` is the state machine of a small blog chain. Accounts create,
update and delete posts. Posts live in an ordered key-value store under
8-byte big-endian id keys. The package also handles the module's
parameters and genesis state, the application's module wiring tables,
and bech32 account addresses.

It needs nothing outside the Python standard library and works with
Python 3.10 and later.

## What is in the package

| Module | What it holds |
| --- | --- |
| `blogchain.bech32` | `bech32_encode`, `bech32_decode`, `acc_address_from_bech32`, `acc_address_to_bech32`, `module_address`, `random_acc_address`, and `AddressError` |
| `blogchain.types` | `Post`, the messages `MsgCreatePost`, `MsgUpdatePost`, `MsgDeletePost`, `MsgUpdateParams`, `Params`, `GenesisState`, `default_params`, `default_genesis`, `key_prefix`, the store key constants and the error classes |
| `blogchain.store` | an in-memory `KVStore`, a `PrefixStore` view over it, and `paginate` with `PageRequest` / `PageResponse` |
| `blogchain.keeper` | `Keeper` for post and parameter state, `MsgServer` for the transaction messages, and `post_id_bytes` |
| `blogchain.genesis` | `init_genesis` and `export_genesis` |
| `blogchain.appconfig` | `bech32_prefixes` / `Bech32Prefixes`, `ModuleAccountPermission`, and the module order, module account and blocked account tables |
| `blogchain.accounts` | `get_macc_perms()` and `blocked_addresses()` |

## Addresses

```python
from blogchain.bech32 import random_acc_address, acc_address_from_bech32, module_address

addr = random_acc_address("cosmos")            # "cosmos1..."
raw = acc_address_from_bech32(addr, "cosmos")  # the 20 raw address bytes
gov = module_address("gov")                    # raw address of the gov module account
```

Bad checksums, mixed case, empty strings and wrong prefixes all raise
`AddressError`, which is a `ValueError`. The default prefix everywhere
is `"cosmos"`.

## Messages

Each message checks itself with `validate_basic()`, which returns the raw
address bytes on success. `MsgCreatePost`, `MsgUpdatePost` and
`MsgDeletePost` raise `InvalidAddressError` when the creator is not a
valid account address; `MsgUpdateParams` raises `BlogError` when the
authority is not one.

```python
from blogchain.bech32 import random_acc_address
from blogchain.types import MsgCreatePost, InvalidAddressError

msg = MsgCreatePost(creator=random_acc_address("cosmos"), title="Hello", body="First post")
msg.validate_basic()

try:
    MsgCreatePost(creator="invalid_address").validate_basic()
except InvalidAddressError as exc:
    print("rejected:", exc)
```

All errors derive from `BlogError` and carry `codespace`, `code` and
`description` attributes.

## Posts and queries

A `Keeper` holds the module's state in a `KVStore` (a new empty one if
none is given). Its authority defaults to the gov module account's
address; an invalid authority raises `ValueError`.

- `append_post` gives a post the next free id, stores it and returns the id.
- `get_post` returns a post or `None`; `set_post` and `remove_post` work on a single post.
- `get_post_count` / `set_post_count` read and write the id counter.
- `list_post(page_request)` returns a page of posts in id order and a `PageResponse`.
- `show_post` returns one post and raises `KeyNotFoundError` when it is missing.
- `get_params`, `set_params` and `params` read and write the parameters.

`paginate` takes either a start `key` or an `offset`, not both
(`InvalidRequestError` otherwise). A `limit` of 0 means 100 and also
counts the total.

`MsgServer` handles the transaction messages on top of a keeper:

- `create_post` returns the id of the new post. When `log_path` is set it
  appends one JSON line per post with the transaction hash, block time,
  gas figures, title, body, creator and time taken.
- `update_post` and `delete_post` raise `KeyNotFoundError` for a missing
  post and `UnauthorizedError` when the sender does not own it.
- `update_params` raises `InvalidSignerError` unless the message comes
  from the keeper's authority.

```python
from blogchain.keeper import Keeper, MsgServer
from blogchain.types import MsgCreatePost

keeper = Keeper()
server = MsgServer(keeper)
post_id = server.create_post(MsgCreatePost(creator=keeper.authority, title="Hi", body="..."))
print(keeper.show_post(post_id).title)
```

## Genesis

`default_genesis()` returns the module's starting state.
`init_genesis(keeper, gen_state)` loads a state into a keeper and
`export_genesis(keeper)` reads it back out.

## What the package does not do

There is no node, no command-line program, no network or consensus
layer and no persistent storage: the store lives in memory, and
`appconfig` only describes how the application's modules are ordered
and which module accounts exist.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the
project root.