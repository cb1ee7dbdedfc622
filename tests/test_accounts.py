from blogchain.accounts import blocked_addresses, get_macc_perms
from blogchain.appconfig import (
    BLOCKED_ACCOUNT_ADDRESSES,
    BURNER,
    GOV,
    IBC_TRANSFER,
    MINT,
    MINTER,
    MODULE_ACCOUNT_PERMISSIONS,
    STAKING,
    BONDED_POOL,
    FEE_COLLECTOR,
)


def test_macc_perms_cover_every_module_account():
    perms = get_macc_perms()
    assert set(perms) == {p.account for p in MODULE_ACCOUNT_PERMISSIONS}
    assert len(perms) == len(MODULE_ACCOUNT_PERMISSIONS)


def test_macc_perms_values():
    perms = get_macc_perms()
    assert perms[MINT] == [MINTER]
    assert perms[BONDED_POOL] == [BURNER, STAKING]
    assert perms[IBC_TRANSFER] == [MINTER, BURNER]
    assert perms[GOV] == [BURNER]
    assert perms[FEE_COLLECTOR] == []


def test_macc_perms_returns_independent_copy():
    first = get_macc_perms()
    first[MINT].append("extra")
    first.pop(GOV)
    second = get_macc_perms()
    assert second[MINT] == [MINTER]
    assert GOV in second


def test_blocked_addresses_match_block_list():
    blocked = blocked_addresses()
    assert blocked == {address: True for address in BLOCKED_ACCOUNT_ADDRESSES}
    assert all(blocked.values())


def test_gov_account_may_receive_funds():
    assert GOV not in blocked_addresses()


def test_blocked_addresses_are_module_accounts():
    assert set(blocked_addresses()) <= set(get_macc_perms())