"""Blog module keeper: post and parameter state, queries and message handling."""

from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from .bech32 import AddressError, acc_address_from_bech32, acc_address_to_bech32, module_address
from .store import KVStore, PageRequest, PageResponse, PrefixStore, paginate
from .types import (
    MODULE_NAME,
    PARAMS_KEY,
    POST_COUNT_KEY,
    POST_KEY,
    BlogError,
    InvalidSignerError,
    KeyNotFoundError,
    MsgCreatePost,
    MsgDeletePost,
    MsgUpdateParams,
    MsgUpdatePost,
    Params,
    Post,
    UnauthorizedError,
    key_prefix,
)

GOV_MODULE_NAME = "gov"


def post_id_bytes(post_id: int) -> bytes:
    """Encode a post id as the 8-byte big-endian store key."""
    return post_id.to_bytes(8, "big")


class Keeper:
    """Owns the blog module's store and the authority allowed to change params."""

    def __init__(
        self,
        store: KVStore | None = None,
        authority: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if authority is None:
            authority = acc_address_to_bech32(module_address(GOV_MODULE_NAME))
        try:
            acc_address_from_bech32(authority)
        except AddressError as exc:
            raise ValueError(f"invalid authority address: {authority}") from exc
        self.store = store if store is not None else KVStore()
        self.authority = authority
        self.logger = logger or logging.getLogger(f"blogchain.x.{MODULE_NAME}")

    def _posts(self) -> PrefixStore:
        return PrefixStore(self.store, key_prefix(POST_KEY))

    # Params -----------------------------------------------------------------

    def get_params(self) -> Params:
        """Return the stored params, or the defaults if none are stored."""
        data = self.store.get(PARAMS_KEY)
        if data is None:
            return Params()
        return Params.from_bytes(data)

    def set_params(self, params: Params) -> None:
        """Store ``params``."""
        self.store.set(PARAMS_KEY, params.to_bytes())

    # Posts ------------------------------------------------------------------

    def get_post_count(self) -> int:
        """Return the number of posts ever appended."""
        data = self.store.get(key_prefix(POST_COUNT_KEY))
        if data is None:
            return 0
        if len(data) < 8:
            raise ValueError("stored post count is shorter than 8 bytes")
        return int.from_bytes(data[:8], "big")

    def set_post_count(self, count: int) -> None:
        """Store the post counter."""
        self.store.set(key_prefix(POST_COUNT_KEY), post_id_bytes(count))

    def append_post(self, post: Post) -> int:
        """Store ``post`` under the next free id and return that id."""
        count = self.get_post_count()
        stored = replace(post, id=count)
        self._posts().set(post_id_bytes(stored.id), stored.to_bytes())
        self.set_post_count(count + 1)
        return count

    def get_post(self, post_id: int) -> Post | None:
        """Return the post with ``post_id``, or None if there is none."""
        data = self._posts().get(post_id_bytes(post_id))
        if data is None:
            return None
        return Post.from_bytes(data)

    def set_post(self, post: Post) -> None:
        """Store ``post`` under its own id."""
        self._posts().set(post_id_bytes(post.id), post.to_bytes())

    def remove_post(self, post_id: int) -> None:
        """Delete the post with ``post_id``."""
        self._posts().delete(post_id_bytes(post_id))

    # Queries ----------------------------------------------------------------

    def list_post(self, page_request: PageRequest | None = None) -> tuple[list[Post], PageResponse]:
        """Return one page of posts in id order and the page response."""
        entries, page = paginate(self._posts(), page_request)
        try:
            posts = [Post.from_bytes(value) for _, value in entries]
        except ValueError as exc:
            raise BlogError(str(exc)) from exc
        return posts, page

    def show_post(self, post_id: int) -> Post:
        """Return the post with ``post_id``, raising if it does not exist."""
        post = self.get_post(post_id)
        if post is None:
            raise KeyNotFoundError()
        return post

    def params(self) -> Params:
        """Answer the params query."""
        return self.get_params()


def _rfc3339(moment: datetime | None) -> str:
    if moment is None:
        return "0001-01-01T00:00:00Z"
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


@dataclass
class MsgServer:
    """Handles the blog module's transaction messages.

    ``tx_bytes``, ``block_time``, ``gas_limit`` and ``gas_used`` describe the
    transaction being handled and go into the transaction log.
    """

    keeper: Keeper
    log_path: str | os.PathLike[str] | None = None
    tx_bytes: bytes = b""
    block_time: datetime | None = None
    gas_limit: int = 0
    gas_used: int = 0

    def create_post(self, msg: MsgCreatePost) -> int:
        """Append a new post and return its id."""
        started = time.perf_counter()
        post_id = self.keeper.append_post(Post(creator=msg.creator, title=msg.title, body=msg.body))
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        if self.log_path is not None:
            self._write_log(msg, elapsed_ms)
        return post_id

    def _write_log(self, msg: MsgCreatePost, elapsed_ms: int) -> None:
        entry = {
            "txHash": self.tx_bytes.hex(),
            "timestamp": _rfc3339(self.block_time),
            "gasWanted": self.gas_limit,
            "gasUsed": self.gas_used,
            "msgSize": len(self.tx_bytes),
            "title": msg.title,
            "body": msg.body,
            "user": msg.creator,
            "timeTakenMs": elapsed_ms,
        }
        try:
            with open(self.log_path, "a", encoding="utf-8") as log_file:
                log_file.write(json.dumps(entry) + "\n")
        except OSError as exc:
            self.keeper.logger.error("Failed to open log file: %s", exc)

    def _owned_post(self, post_id: int, creator: str) -> Post:
        existing = self.keeper.get_post(post_id)
        if existing is None:
            raise KeyNotFoundError(f"key {post_id} doesn't exist")
        if creator != existing.creator:
            raise UnauthorizedError("incorrect owner")
        return existing

    def update_post(self, msg: MsgUpdatePost) -> None:
        """Replace a post's title and body; only its creator may do so."""
        self._owned_post(msg.id, msg.creator)
        self.keeper.set_post(Post(creator=msg.creator, id=msg.id, title=msg.title, body=msg.body))

    def delete_post(self, msg: MsgDeletePost) -> None:
        """Delete a post; only its creator may do so."""
        self._owned_post(msg.id, msg.creator)
        self.keeper.remove_post(msg.id)

    def update_params(self, msg: MsgUpdateParams) -> None:
        """Store new params; only the keeper's authority may do so."""
        if self.keeper.authority != msg.authority:
            raise InvalidSignerError(
                f"invalid authority; expected {self.keeper.authority}, got {msg.authority}"
            )
        self.keeper.set_params(msg.params)