"""State machine for an on-chain blog: posts, parameters, genesis and addresses."""

__version__ = "0.1.0"

__all__ = ["accounts", "appconfig", "bech32", "genesis", "keeper", "store", "types"]