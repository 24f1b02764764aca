from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass, field
from typing import Final

from errors import CommitmentSpent, InvalidKey

KEY_BYTES: Final[int] = 32
DIGEST = hashlib.sha256

logger = logging.getLogger(__name__)


def new_key() -> str:
    """Fresh 256-bit key as lowercase hex.

    The hex text itself is the HMAC key, so the disclosed string can be pasted
    as-is into any HMAC-SHA256 calculator.
    """
    return secrets.token_hex(KEY_BYTES)


def commit(key: str, move: str) -> str:
    return hmac.new(key.encode("utf-8"), move.encode("utf-8"), DIGEST).hexdigest()


def reveal(key: str) -> str:
    return key


def verify(key: str, move: str, mac: str) -> bool:
    """Check a published HMAC against the key disclosed after the round."""
    key = key.strip()
    try:
        raw = bytes.fromhex(key)
    except ValueError as exc:
        raise InvalidKey(f"key is not valid hex: {key!r}") from exc
    if len(raw) != KEY_BYTES:
        raise InvalidKey(f"key must be {KEY_BYTES * 2} hex characters, got {len(key)}")
    return hmac.compare_digest(commit(key, move), mac.strip().lower())


@dataclass
class Commitment:
    mac: str
    _key: str = field(repr=False)
    spent: bool = False

    @classmethod
    def create(cls, move: str, key: str | None = None) -> "Commitment":
        if key is None:
            key = new_key()
        mac = commit(key, move)
        logger.debug("created commitment %s", mac)
        return cls(mac=mac, _key=key)

    def disclose(self) -> str:
        if self.spent:
            raise CommitmentSpent(f"commitment {self.mac} was already disclosed")
        self.spent = True
        return reveal(self._key)
