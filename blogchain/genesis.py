"""Genesis import and export for the blog module."""

from __future__ import annotations

from .keeper import Keeper
from .types import GenesisState, default_genesis


def init_genesis(keeper: Keeper, gen_state: GenesisState) -> None:
    """Load the module's state from ``gen_state`` into ``keeper``."""
    keeper.set_params(gen_state.params)


def export_genesis(keeper: Keeper) -> GenesisState:
    """Return the module's current state as a genesis state."""
    genesis = default_genesis()
    genesis.params = keeper.get_params()
    return genesis