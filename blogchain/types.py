"""Blog module types: store keys, errors, params, genesis, posts and messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .bech32 import ACCOUNT_PREFIX, AddressError, acc_address_from_bech32

MODULE_NAME = "blog"
STORE_KEY = MODULE_NAME
MEM_STORE_KEY = "mem_blog"
POST_KEY = "Post/value/"
POST_COUNT_KEY = "Post/count/"
PARAMS_KEY = b"p_blog"
DEFAULT_INDEX = 1

_UINT64_MAX = (1 << 64) - 1


def key_prefix(p: str) -> bytes:
    """Return the store key prefix for ``p``."""
    return p.encode()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class BlogError(Exception):
    """Base error; registered subclasses carry a codespace, code and description."""

    codespace = MODULE_NAME
    code = 1
    description = ""

    def __init__(self, message: str = "") -> None:
        self.message = message
        if message and self.description:
            text = f"{message}: {self.description}"
        else:
            text = message or self.description
        super().__init__(text)


class InvalidAddressError(BlogError):
    codespace = "sdk"
    code = 7
    description = "invalid address"


class UnauthorizedError(BlogError):
    codespace = "sdk"
    code = 4
    description = "unauthorized"


class InvalidRequestError(BlogError):
    codespace = "sdk"
    code = 18
    description = "invalid request"


class KeyNotFoundError(BlogError):
    codespace = "sdk"
    code = 38
    description = "key not found"


class InvalidSignerError(BlogError):
    code = 1100
    description = "expected gov account as only signer for proposal message"


class SampleError(BlogError):
    code = 1101
    description = "sample error"


# ---------------------------------------------------------------------------
# Wire encoding
# ---------------------------------------------------------------------------


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while True:
        low = value & 0x7F
        value >>= 7
        if value:
            out.append(low | 0x80)
        else:
            out.append(low)
            return bytes(out)


def _read_varint(data: bytes, pos: int) -> tuple[int, int]:
    value = 0
    for shift in range(0, 70, 7):
        if pos >= len(data):
            raise ValueError("truncated varint")
        byte = data[pos]
        pos += 1
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return value & _UINT64_MAX, pos
    raise ValueError("varint too long")


def _iter_fields(data: bytes) -> Iterator[tuple[int, int, int | bytes]]:
    pos = 0
    while pos < len(data):
        tag, pos = _read_varint(data, pos)
        number, wire_type = tag >> 3, tag & 7
        if number == 0:
            raise ValueError("invalid field number 0")
        if wire_type == 0:
            value, pos = _read_varint(data, pos)
            yield number, wire_type, value
        elif wire_type == 2:
            length, pos = _read_varint(data, pos)
            if pos + length > len(data):
                raise ValueError("truncated length-delimited field")
            yield number, wire_type, data[pos:pos + length]
            pos += length
        elif wire_type in (1, 5):
            size = 8 if wire_type == 1 else 4
            if pos + size > len(data):
                raise ValueError("truncated fixed-width field")
            yield number, wire_type, data[pos:pos + size]
            pos += size
        else:
            raise ValueError(f"unsupported wire type {wire_type}")


def _string_field(number: int, text: str) -> bytes:
    encoded = text.encode()
    return _encode_varint(number << 3 | 2) + _encode_varint(len(encoded)) + encoded


# ---------------------------------------------------------------------------
# Params and genesis
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Params:
    """Module parameters; the blog module defines none."""

    def validate(self) -> None:
        """Check the parameters; every value is currently valid."""
        return None

    def to_bytes(self) -> bytes:
        """Serialise to wire format (always empty)."""
        return b""

    @classmethod
    def from_bytes(cls, data: bytes) -> Params:
        """Parse wire format, ignoring unknown fields."""
        for _ in _iter_fields(data):
            pass
        return cls()


def default_params() -> Params:
    """Return the default parameters."""
    return Params()


@dataclass
class GenesisState:
    """Initial state of the module."""

    params: Params = field(default_factory=default_params)

    def validate(self) -> None:
        """Validate the genesis state, raising on failure."""
        self.params.validate()


def default_genesis() -> GenesisState:
    """Return the default genesis state."""
    return GenesisState(params=default_params())


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


@dataclass
class Post:
    """A blog post as stored on chain."""

    title: str = ""
    body: str = ""
    creator: str = ""
    id: int = 0

    def to_bytes(self) -> bytes:
        """Serialise to wire format, omitting default values."""
        if not 0 <= self.id <= _UINT64_MAX:
            raise ValueError(f"post id out of range: {self.id}")
        parts = [
            _string_field(number, text)
            for number, text in ((1, self.title), (2, self.body), (3, self.creator))
            if text
        ]
        if self.id:
            parts.append(_encode_varint(4 << 3) + _encode_varint(self.id))
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, data: bytes) -> Post:
        """Parse wire format produced by :meth:`to_bytes`."""
        post = cls()
        for number, wire_type, value in _iter_fields(data):
            if number in (1, 2, 3) and wire_type == 2:
                text = bytes(value).decode()
                name = {1: "title", 2: "body", 3: "creator"}[number]
                setattr(post, name, text)
            elif number == 4 and wire_type == 0:
                post.id = int(value)
            elif number in (1, 2, 3, 4):
                raise ValueError(f"wrong wire type {wire_type} for field {number}")
        return post


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


def _check_creator(creator: str) -> bytes:
    try:
        return acc_address_from_bech32(creator, ACCOUNT_PREFIX)
    except AddressError as exc:
        raise InvalidAddressError(f"invalid creator address ({exc})") from exc


@dataclass
class MsgCreatePost:
    creator: str = ""
    title: str = ""
    body: str = ""

    def validate_basic(self) -> bytes:
        """Check the creator address; return its raw bytes."""
        return _check_creator(self.creator)


@dataclass
class MsgUpdatePost:
    creator: str = ""
    title: str = ""
    body: str = ""
    id: int = 0

    def validate_basic(self) -> bytes:
        """Check the creator address; return its raw bytes."""
        return _check_creator(self.creator)


@dataclass
class MsgDeletePost:
    creator: str = ""
    id: int = 0

    def validate_basic(self) -> bytes:
        """Check the creator address; return its raw bytes."""
        return _check_creator(self.creator)


@dataclass
class MsgUpdateParams:
    authority: str = ""
    params: Params = field(default_factory=default_params)

    def validate_basic(self) -> bytes:
        """Check the authority address and params; return the authority bytes."""
        try:
            raw = acc_address_from_bech32(self.authority, ACCOUNT_PREFIX)
        except AddressError as exc:
            raise BlogError(f"invalid authority address: {exc}") from exc
        self.params.validate()
        return raw