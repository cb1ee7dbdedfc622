import pytest

from blogchain.genesis import export_genesis, init_genesis
from blogchain.keeper import Keeper
from blogchain.store import KVStore
from blogchain.types import PARAMS_KEY, GenesisState, Params, default_genesis, default_params


@pytest.fixture
def keeper():
    return Keeper(KVStore())


def test_genesis_round_trip(keeper):
    genesis_state = GenesisState(params=default_params())
    init_genesis(keeper, genesis_state)
    got = export_genesis(keeper)
    assert got == genesis_state
    assert got.params == genesis_state.params


def test_init_genesis_stores_params(keeper):
    assert keeper.store.get(PARAMS_KEY) is None
    init_genesis(keeper, default_genesis())
    assert keeper.store.get(PARAMS_KEY) == b""
    assert keeper.get_params() == Params()


def test_export_without_init_gives_defaults(keeper):
    got = export_genesis(keeper)
    assert got == default_genesis()


def test_exported_genesis_is_valid(keeper):
    init_genesis(keeper, default_genesis())
    got = export_genesis(keeper)
    assert got.validate() is None
    assert got.params == default_params()


def test_export_returns_fresh_state(keeper):
    init_genesis(keeper, default_genesis())
    first = export_genesis(keeper)
    second = export_genesis(keeper)
    assert first == second
    assert first is not second