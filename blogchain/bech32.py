"""Bech32 encoding and account address helpers."""

from __future__ import annotations

import hashlib
import secrets

ACCOUNT_PREFIX = "cosmos"
"""Human-readable part used for account addresses on this chain."""

ADDRESS_LENGTH = 20
MAX_ADDRESS_LENGTH = 255
MAX_BECH32_LENGTH = 1023

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_INDEX = {char: index for index, char in enumerate(_CHARSET)}
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_CHECKSUM_LENGTH = 6


class AddressError(ValueError):
    """Raised when an address or a bech32 string is malformed."""


def _polymod(values: list[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _create_checksum(hrp: str, data: list[int]) -> list[int]:
    polymod = _polymod(_hrp_expand(hrp) + data + [0] * _CHECKSUM_LENGTH) ^ 1
    return [(polymod >> (5 * (5 - i))) & 31 for i in range(_CHECKSUM_LENGTH)]


def _verify_checksum(hrp: str, data: list[int]) -> bool:
    return _polymod(_hrp_expand(hrp) + data) == 1


def _convert_bits(data: list[int] | bytes, from_bits: int, to_bits: int, pad: bool) -> list[int]:
    accumulator = 0
    bits = 0
    result: list[int] = []
    max_value = (1 << to_bits) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise AddressError(f"invalid data value {value}")
        accumulator = (accumulator << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((accumulator >> bits) & max_value)
    if pad:
        if bits:
            result.append((accumulator << (to_bits - bits)) & max_value)
    elif bits >= from_bits or ((accumulator << (to_bits - bits)) & max_value):
        raise AddressError("invalid padding in bech32 data")
    return result


def _check_hrp(hrp: str) -> None:
    if not hrp:
        raise AddressError("human-readable part cannot be empty")
    for char in hrp:
        if not 33 <= ord(char) <= 126:
            raise AddressError(f"invalid character in human-readable part: {char!r}")


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode raw bytes under the human-readable part ``hrp``."""
    _check_hrp(hrp)
    if hrp.lower() != hrp and hrp.upper() != hrp:
        raise AddressError("human-readable part has mixed case")
    hrp = hrp.lower()
    values = _convert_bits(bytes(data), 8, 5, pad=True)
    checksum = _create_checksum(hrp, values)
    return hrp + "1" + "".join(_CHARSET[v] for v in values + checksum)


def bech32_decode(address: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and raw bytes."""
    if len(address) > MAX_BECH32_LENGTH:
        raise AddressError(f"bech32 string too long: {len(address)}")
    for char in address:
        if not 33 <= ord(char) <= 126:
            raise AddressError(f"invalid character in bech32 string: {char!r}")
    if address.lower() != address and address.upper() != address:
        raise AddressError("bech32 string has mixed case")
    address = address.lower()
    separator = address.rfind("1")
    if separator < 1:
        raise AddressError("missing or misplaced separator in bech32 string")
    if separator + _CHECKSUM_LENGTH + 1 > len(address):
        raise AddressError("bech32 checksum too short")
    hrp = address[:separator]
    try:
        values = [_CHARSET_INDEX[c] for c in address[separator + 1:]]
    except KeyError as exc:
        raise AddressError(f"invalid character in bech32 data: {exc.args[0]!r}") from None
    if not _verify_checksum(hrp, values):
        raise AddressError("invalid bech32 checksum")
    raw = _convert_bits(values[:-_CHECKSUM_LENGTH], 5, 8, pad=False)
    return hrp, bytes(raw)


def _verify_address_format(raw: bytes) -> None:
    if not raw:
        raise AddressError("addresses cannot be empty")
    if len(raw) > MAX_ADDRESS_LENGTH:
        raise AddressError(f"address max length is {MAX_ADDRESS_LENGTH}, got {len(raw)}")


def acc_address_from_bech32(address: str, prefix: str = ACCOUNT_PREFIX) -> bytes:
    """Parse an account address, checking its prefix and length."""
    if not address.strip():
        raise AddressError("empty address string is not allowed")
    try:
        hrp, raw = bech32_decode(address)
    except AddressError as exc:
        raise AddressError(f"decoding bech32 failed: {exc}") from exc
    if hrp != prefix:
        raise AddressError(f"invalid Bech32 prefix; expected {prefix}, got {hrp}")
    _verify_address_format(raw)
    return raw


def acc_address_to_bech32(raw: bytes, prefix: str = ACCOUNT_PREFIX) -> str:
    """Render raw account bytes as a bech32 address; empty bytes give ''."""
    if not raw:
        return ""
    return bech32_encode(prefix, raw)


def module_address(name: str) -> bytes:
    """Return the deterministic account bytes of a module account."""
    return hashlib.sha256(name.encode()).digest()[:ADDRESS_LENGTH]


def random_acc_address(prefix: str = ACCOUNT_PREFIX) -> str:
    """Return the address of a freshly generated random public key."""
    public_key = secrets.token_bytes(32)
    raw = hashlib.sha256(public_key).digest()[:ADDRESS_LENGTH]
    return acc_address_to_bech32(raw, prefix)