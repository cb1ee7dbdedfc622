"""Ordered in-memory key-value stores and offset or key based pagination."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterator, Union

from .types import InvalidRequestError

DEFAULT_LIMIT = 100
"""Page size used when a request does not give a limit."""


def _check_key(key: bytes) -> bytes:
    if not key:
        raise ValueError("key is nil")
    return bytes(key)


def _check_value(value: bytes | None) -> bytes:
    if value is None:
        raise ValueError("value is nil")
    return bytes(value)


class KVStore:
    """A byte-keyed store that iterates its keys in ascending order."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}
        self._keys: list[bytes] = []

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: bytes) -> bytes | None:
        """Return the value stored under ``key``, or None."""
        return self._data.get(_check_key(key))

    def set(self, key: bytes, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        key = _check_key(key)
        value = _check_value(value)
        if key not in self._data:
            bisect.insort(self._keys, key)
        self._data[key] = value

    def delete(self, key: bytes) -> None:
        """Remove ``key``; removing a missing key does nothing."""
        key = _check_key(key)
        if key in self._data:
            del self._data[key]
            self._keys.pop(bisect.bisect_left(self._keys, key))

    def items(self, prefix: bytes = b"") -> Iterator[tuple[bytes, bytes]]:
        """Iterate over a snapshot of the pairs whose key starts with ``prefix``."""
        prefix = bytes(prefix)
        start = bisect.bisect_left(self._keys, prefix)
        snapshot = []
        for key in self._keys[start:]:
            if not key.startswith(prefix):
                break
            snapshot.append((key, self._data[key]))
        return iter(snapshot)


class PrefixStore:
    """A view of a :class:`KVStore` restricted to keys under one prefix."""

    def __init__(self, parent: Union[KVStore, "PrefixStore"], prefix: bytes) -> None:
        if isinstance(parent, PrefixStore):
            self.parent: KVStore = parent.parent
            self.prefix = parent.prefix + bytes(prefix)
        else:
            self.parent = parent
            self.prefix = bytes(prefix)

    def _full_key(self, key: bytes) -> bytes:
        return self.prefix + _check_key(key)

    def get(self, key: bytes) -> bytes | None:
        """Return the value under ``key`` inside the prefix, or None."""
        return self.parent.get(self._full_key(key))

    def set(self, key: bytes, value: bytes) -> None:
        """Store ``value`` under ``key`` inside the prefix."""
        self.parent.set(self._full_key(key), value)

    def delete(self, key: bytes) -> None:
        """Remove ``key`` from inside the prefix."""
        self.parent.delete(self._full_key(key))

    def items(self) -> Iterator[tuple[bytes, bytes]]:
        """Iterate over the pairs under the prefix, with the prefix stripped."""
        cut = len(self.prefix)
        return ((key[cut:], value) for key, value in self.parent.items(self.prefix))


@dataclass
class PageRequest:
    """Which page of results to return."""

    key: bytes = b""
    offset: int = 0
    limit: int = 0
    count_total: bool = False
    reverse: bool = False


@dataclass
class PageResponse:
    """Where the next page starts and, when asked for, the total count."""

    next_key: bytes | None = None
    total: int = 0


def paginate(
    store: KVStore | PrefixStore,
    page_request: PageRequest | None = None,
) -> tuple[list[tuple[bytes, bytes]], PageResponse]:
    """Return one page of ``store``'s pairs and the matching page response."""
    request = page_request if page_request is not None else PageRequest()
    key = bytes(request.key or b"")
    offset = request.offset
    limit = request.limit
    count_total = request.count_total

    if offset > 0 and key:
        raise InvalidRequestError("either offset or key is expected, got both")
    if offset < 0 or limit < 0:
        raise InvalidRequestError("offset and limit cannot be negative")

    if limit == 0:
        limit = DEFAULT_LIMIT
        count_total = True

    entries = list(store.items())
    if request.reverse:
        entries.reverse()

    results: list[tuple[bytes, bytes]] = []

    if key:
        if request.reverse:
            selected = (pair for pair in entries if pair[0] <= key)
        else:
            selected = (pair for pair in entries if pair[0] >= key)
        next_key = None
        for entry_key, value in selected:
            if len(results) == limit:
                next_key = entry_key
                break
            results.append((entry_key, value))
        return results, PageResponse(next_key=next_key)

    end = offset + limit
    hits = 0
    next_key = None
    for entry_key, value in entries:
        hits += 1
        if hits <= offset:
            continue
        if hits <= end:
            results.append((entry_key, value))
        elif hits == end + 1:
            next_key = entry_key
            if not count_total:
                break

    response = PageResponse(next_key=next_key)
    if count_total:
        response.total = hits
    return results, response