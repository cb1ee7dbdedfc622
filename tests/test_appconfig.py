from datetime import timedelta

import pytest

from blogchain.appconfig import (
    AUTH,
    BEGIN_BLOCKERS,
    BLOCKED_ACCOUNT_ADDRESSES,
    BONDED_POOL,
    BURNER,
    CAPABILITY,
    CONFIGURED_MODULES,
    END_BLOCKERS,
    EXPORT_GENESIS_ORDER,
    GENESIS_MODULE_ORDER,
    GENUTIL,
    GOV,
    GROUP_MAX_EXECUTION_PERIOD,
    GROUP_MAX_METADATA_LEN,
    MINT,
    MINTER,
    MODULE_ACCOUNT_PERMISSIONS,
    PRE_BLOCKERS,
    PREFIXES,
    STAKING,
    STORE_KEY_OVERRIDES,
    UPGRADE,
    Bech32Prefixes,
    ModuleAccountPermission,
    bech32_prefixes,
)
from blogchain.bech32 import ACCOUNT_PREFIX
from blogchain.types import MODULE_NAME


def test_prefixes_derived_from_custom_prefix():
    prefixes = bech32_prefixes("test")
    assert prefixes.account_address == "test"
    assert prefixes.validator_address == "testvaloper"
    assert prefixes.consensus_address == "testvalcons"
    assert prefixes.validator_pubkey == "testvaloperpub"
    assert prefixes.consensus_pubkey == "testvalconspub"
    assert prefixes.account_pubkey == "testpub"


def test_chain_prefixes_use_account_prefix():
    assert PREFIXES == bech32_prefixes(ACCOUNT_PREFIX)
    assert PREFIXES.account_address == ACCOUNT_PREFIX
    assert PREFIXES.validator_pubkey.startswith(PREFIXES.validator_address)
    assert PREFIXES.consensus_pubkey.startswith(PREFIXES.consensus_address)


def test_prefixes_are_frozen():
    prefixes = bech32_prefixes(ACCOUNT_PREFIX)
    with pytest.raises(AttributeError):
        prefixes.account_address = "other"
    assert prefixes.account_address == ACCOUNT_PREFIX


def test_empty_prefix_rejected():
    with pytest.raises(ValueError):
        bech32_prefixes("")


def test_genesis_order_invariants():
    assert GENESIS_MODULE_ORDER[0] == CAPABILITY
    assert GENESIS_MODULE_ORDER[-1] == MODULE_NAME
    assert GENESIS_MODULE_ORDER.index(GENUTIL) > GENESIS_MODULE_ORDER.index(STAKING)
    assert GENESIS_MODULE_ORDER.index(GENUTIL) > GENESIS_MODULE_ORDER.index(AUTH)
    assert len(set(GENESIS_MODULE_ORDER)) == len(GENESIS_MODULE_ORDER)
    assert EXPORT_GENESIS_ORDER == GENESIS_MODULE_ORDER


def test_blockers_end_with_blog_module():
    assert BEGIN_BLOCKERS.index(MODULE_NAME) == len(BEGIN_BLOCKERS) - 1
    assert END_BLOCKERS.index(MODULE_NAME) == len(END_BLOCKERS) - 1
    assert PRE_BLOCKERS.count(UPGRADE) == 1
    assert PRE_BLOCKERS == (UPGRADE,)
    assert set(BEGIN_BLOCKERS) <= set(GENESIS_MODULE_ORDER)
    assert set(END_BLOCKERS) <= set(GENESIS_MODULE_ORDER)


def test_blocked_addresses_are_module_accounts():
    accounts = {perm.account for perm in MODULE_ACCOUNT_PERMISSIONS}
    assert set(BLOCKED_ACCOUNT_ADDRESSES) <= accounts
    assert BLOCKED_ACCOUNT_ADDRESSES.count(GOV) == 0
    assert ModuleAccountPermission(GOV, (BURNER,)) in MODULE_ACCOUNT_PERMISSIONS


def test_module_account_permissions():
    by_account = {perm.account: perm.permissions for perm in MODULE_ACCOUNT_PERMISSIONS}
    assert by_account[MINT] == (MINTER,)
    assert by_account[BONDED_POOL] == (BURNER, STAKING)
    assert by_account[GOV] == (BURNER,)
    assert ModuleAccountPermission("x").permissions == ()


def test_configured_modules_and_group_settings():
    assert CONFIGURED_MODULES[-1] == MODULE_NAME
    assert STORE_KEY_OVERRIDES[AUTH] == "acc"
    assert GROUP_MAX_EXECUTION_PERIOD == timedelta(seconds=1209600)
    assert GROUP_MAX_METADATA_LEN == 255
    assert isinstance(PREFIXES, Bech32Prefixes) and PREFIXES.account_pubkey.endswith("pub")