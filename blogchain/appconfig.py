"""Application wiring: address prefixes, module orders and module accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .bech32 import ACCOUNT_PREFIX
from .types import MODULE_NAME as BLOG

APP_NAME = "blog"

# Module names of the modules the application is composed of.
CAPABILITY = "capability"
AUTH = "auth"
BANK = "bank"
DISTRIBUTION = "distribution"
STAKING = "staking"
SLASHING = "slashing"
GOV = "gov"
MINT = "mint"
CRISIS = "crisis"
IBC = "ibc"
GENUTIL = "genutil"
EVIDENCE = "evidence"
AUTHZ = "authz"
IBC_TRANSFER = "transfer"
ICA = "interchainaccounts"
IBC_FEE = "feeibc"
FEEGRANT = "feegrant"
PARAMS = "params"
UPGRADE = "upgrade"
VESTING = "vesting"
NFT = "nft"
GROUP = "group"
CONSENSUS = "consensus"
CIRCUIT = "circuit"
RUNTIME = "runtime"
TX = "tx"

FEE_COLLECTOR = "fee_collector"
BONDED_POOL = "bonded_tokens_pool"
NOT_BONDED_POOL = "not_bonded_tokens_pool"

MINTER = "minter"
BURNER = "burner"


@dataclass(frozen=True)
class Bech32Prefixes:
    """Human-readable parts for every kind of address and public key."""

    account_address: str
    account_pubkey: str
    validator_address: str
    validator_pubkey: str
    consensus_address: str
    consensus_pubkey: str


def bech32_prefixes(account_prefix: str = ACCOUNT_PREFIX) -> Bech32Prefixes:
    """Derive all address prefixes from the account prefix."""
    if not account_prefix:
        raise ValueError("account prefix cannot be empty")
    return Bech32Prefixes(
        account_address=account_prefix,
        account_pubkey=account_prefix + "pub",
        validator_address=account_prefix + "valoper",
        validator_pubkey=account_prefix + "valoperpub",
        consensus_address=account_prefix + "valcons",
        consensus_pubkey=account_prefix + "valconspub",
    )


PREFIXES = bech32_prefixes(ACCOUNT_PREFIX)
"""The chain's prefixes; frozen, like a sealed configuration."""


@dataclass(frozen=True)
class ModuleAccountPermission:
    """A module account and the permissions it holds."""

    account: str
    permissions: tuple[str, ...] = ()


# Capability first so that capabilities exist before others claim them;
# genutil after staking and auth so pools and params are in place.
GENESIS_MODULE_ORDER: tuple[str, ...] = (
    CAPABILITY,
    AUTH,
    BANK,
    DISTRIBUTION,
    STAKING,
    SLASHING,
    GOV,
    MINT,
    CRISIS,
    IBC,
    GENUTIL,
    EVIDENCE,
    AUTHZ,
    IBC_TRANSFER,
    ICA,
    IBC_FEE,
    FEEGRANT,
    PARAMS,
    UPGRADE,
    VESTING,
    NFT,
    GROUP,
    CONSENSUS,
    CIRCUIT,
    BLOG,
)

BEGIN_BLOCKERS: tuple[str, ...] = (
    MINT,
    DISTRIBUTION,
    SLASHING,
    EVIDENCE,
    STAKING,
    AUTHZ,
    GENUTIL,
    CAPABILITY,
    IBC,
    IBC_TRANSFER,
    ICA,
    IBC_FEE,
    BLOG,
)

END_BLOCKERS: tuple[str, ...] = (
    CRISIS,
    GOV,
    STAKING,
    FEEGRANT,
    GROUP,
    GENUTIL,
    IBC,
    IBC_TRANSFER,
    CAPABILITY,
    ICA,
    IBC_FEE,
    BLOG,
)

PRE_BLOCKERS: tuple[str, ...] = (UPGRADE,)

EXPORT_GENESIS_ORDER = GENESIS_MODULE_ORDER
"""Export order; equal to the init order when not given separately."""

MODULE_ACCOUNT_PERMISSIONS: tuple[ModuleAccountPermission, ...] = (
    ModuleAccountPermission(FEE_COLLECTOR),
    ModuleAccountPermission(DISTRIBUTION),
    ModuleAccountPermission(MINT, (MINTER,)),
    ModuleAccountPermission(BONDED_POOL, (BURNER, STAKING)),
    ModuleAccountPermission(NOT_BONDED_POOL, (BURNER, STAKING)),
    ModuleAccountPermission(GOV, (BURNER,)),
    ModuleAccountPermission(NFT),
    ModuleAccountPermission(IBC_TRANSFER, (MINTER, BURNER)),
    ModuleAccountPermission(IBC_FEE),
    ModuleAccountPermission(ICA),
)

# The gov module account is deliberately allowed to receive funds.
BLOCKED_ACCOUNT_ADDRESSES: tuple[str, ...] = (
    FEE_COLLECTOR,
    DISTRIBUTION,
    MINT,
    BONDED_POOL,
    NOT_BONDED_POOL,
    NFT,
)

STORE_KEY_OVERRIDES: dict[str, str] = {AUTH: "acc"}

GROUP_MAX_EXECUTION_PERIOD = timedelta(seconds=1209600)
GROUP_MAX_METADATA_LEN = 255

CONFIGURED_MODULES: tuple[str, ...] = (
    RUNTIME,
    AUTH,
    NFT,
    VESTING,
    BANK,
    STAKING,
    SLASHING,
    PARAMS,
    TX,
    GENUTIL,
    AUTHZ,
    UPGRADE,
    DISTRIBUTION,
    EVIDENCE,
    MINT,
    GROUP,
    FEEGRANT,
    GOV,
    CRISIS,
    CONSENSUS,
    CIRCUIT,
    BLOG,
)
"""Modules wired through the application configuration, in order."""