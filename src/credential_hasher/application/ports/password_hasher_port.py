"""Port for password encoding, verification and salt generation."""

from __future__ import annotations

from typing import Protocol


class PasswordHasherPort(Protocol):
    """Password hasher contract bound to one algorithm configuration.

    ``verify`` re-derives keys with the implementation's own digest and never
    consults the algorithm name embedded in the credential. Callers must route
    a credential to the hasher whose ``algorithm`` matches that name; a wrong
    choice yields ``False`` rather than an error.
    """

    @property
    def algorithm(self) -> str:
        """Algorithm identifier written as the first credential field."""

    @property
    def iterations(self) -> int:
        """Work factor used for newly encoded credentials."""

    def encode(self, password: str, salt: str) -> str:
        """Encode plaintext password with caller-supplied salt."""

    def verify(self, *, password: str, encoded: str) -> bool:
        """Verify plaintext password against an encoded credential string."""

    def salt(self) -> str:
        """Generate a fresh random salt."""
