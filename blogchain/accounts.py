"""Module account permissions and the accounts barred from receiving funds."""

from __future__ import annotations

from .appconfig import BLOCKED_ACCOUNT_ADDRESSES, MODULE_ACCOUNT_PERMISSIONS


def get_macc_perms() -> dict[str, list[str]]:
    """Return a fresh copy of the module account permissions."""
    return {perm.account: list(perm.permissions) for perm in MODULE_ACCOUNT_PERMISSIONS}


def blocked_addresses() -> dict[str, bool]:
    """Return the accounts blocked from receiving funds.

    Uses the configured block list; if it is empty, every module account
    is blocked.
    """
    if BLOCKED_ACCOUNT_ADDRESSES:
        return {address: True for address in BLOCKED_ACCOUNT_ADDRESSES}
    return {address: True for address in get_macc_perms()}