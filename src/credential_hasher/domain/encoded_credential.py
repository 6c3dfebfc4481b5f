"""Credential string model: ``algorithm$iterations$salt$key``."""

from __future__ import annotations

import re
from dataclasses import dataclass

CREDENTIAL_DELIMITER = "$"
CREDENTIAL_FIELD_COUNT = 4

MAX_ITERATIONS = 2**31 - 1

_ITERATIONS_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class IterationParseError(ValueError):
    """Iterations field of an otherwise well-shaped credential is not a positive integer."""

    reason: str

    def __str__(self) -> str:
        return self.reason


@dataclass(frozen=True)
class InvalidSaltError(ValueError):
    """Salt cannot be embedded into a credential string."""

    reason: str

    def __str__(self) -> str:
        return self.reason


@dataclass(frozen=True)
class EncodedCredential:
    """Parsed fields of one credential string."""

    algorithm: str
    iterations: int
    salt: str
    key: str

    def to_string(self) -> str:
        """Join fields back into the persisted credential form."""

        return CREDENTIAL_DELIMITER.join(
            (self.algorithm, str(self.iterations), self.salt, self.key)
        )


def ensure_salt_embeddable(*, salt: str) -> str:
    """Reject salts that would make the credential string ambiguous."""

    if CREDENTIAL_DELIMITER in salt:
        raise InvalidSaltError("salt_contains_delimiter")
    return salt


def split_encoded_credential(*, encoded: str) -> list[str] | None:
    """Split credential into its fields or return None when the shape is wrong."""

    fields = encoded.split(CREDENTIAL_DELIMITER)
    if len(fields) != CREDENTIAL_FIELD_COUNT:
        return None
    return fields


def parse_iterations(*, raw: str) -> int:
    """Parse the iterations field as a decimal in ``1..MAX_ITERATIONS``.

    Leading zeros are accepted so credentials from other encoders still
    verify. Signs, whitespace and underscores are not.
    """

    if _ITERATIONS_PATTERN.fullmatch(raw) is None:
        raise IterationParseError("invalid_iterations_field")
    # hashlib only takes counts in the C int range
    digits = raw.lstrip("0")
    if not digits or len(digits) > len(str(MAX_ITERATIONS)) or int(digits) > MAX_ITERATIONS:
        raise IterationParseError("iterations_out_of_range")
    return int(digits)


def parse_encoded_credential(*, encoded: str) -> EncodedCredential | None:
    """Parse credential string; None means the string is not a credential at all."""

    fields = split_encoded_credential(encoded=encoded)
    if fields is None:
        return None

    algorithm, iterations_raw, salt, key = fields
    return EncodedCredential(
        algorithm=algorithm,
        iterations=parse_iterations(raw=iterations_raw),
        salt=salt,
        key=key,
    )
