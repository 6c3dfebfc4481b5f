"""Random salt generation over a fixed printable alphabet."""

from __future__ import annotations

import math
import secrets
from collections.abc import Callable
from dataclasses import dataclass

SALT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
SALT_ENTROPY_BITS = 32

RandomBytesSource = Callable[[int], bytes]


@dataclass(frozen=True)
class EntropySourceError(RuntimeError):
    """Secure random source could not supply salt bytes."""

    reason: str

    def __str__(self) -> str:
        return self.reason


def salt_length(*, entropy_bits: int = SALT_ENTROPY_BITS, alphabet: str = SALT_ALPHABET) -> int:
    """Return characters needed to carry ``entropy_bits`` over ``alphabet``."""

    return math.ceil(entropy_bits / math.log2(len(alphabet)))


def generate_salt(*, random_bytes: RandomBytesSource = secrets.token_bytes) -> str:
    """Generate one salt string from the secure random source."""

    length = salt_length()
    try:
        raw = random_bytes(length)
    except OSError as error:
        raise EntropySourceError("random_source_unavailable") from error
    if len(raw) != length:
        raise EntropySourceError("random_source_short_read")

    return "".join(SALT_ALPHABET[byte % len(SALT_ALPHABET)] for byte in raw)
