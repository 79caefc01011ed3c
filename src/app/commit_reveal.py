from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Final

KEY_BYTES: Final[int] = 32


def generate_key(num_bytes: int = KEY_BYTES) -> str:
    # Hex so the revealed key can be pasted straight into any HMAC calculator.
    return secrets.token_hex(num_bytes)


def generate_tag(key: str, move: str) -> str:
    # The key is used as its hex text, not the decoded bytes.
    return hmac.new(key.encode("utf-8"), move.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_tag(*, key: str, move: str, tag: str) -> bool:
    return secrets.compare_digest(tag.strip().lower(), generate_tag(key, move))


class Committer:
    """Binds the computer's move to a fresh key before the user answers."""

    def generate_key(self) -> str:
        return generate_key()

    def generate_tag(self, key: str, move: str) -> str:
        return generate_tag(key, move)
