"""Immutable lookup of configured hashers by algorithm name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort
from credential_hasher.domain.encoded_credential import split_encoded_credential


@dataclass(frozen=True)
class UnknownHasherAlgorithmError(LookupError):
    """No hasher is registered for the requested algorithm name."""

    algorithm: str

    def __str__(self) -> str:
        return f"unknown_hasher_algorithm:{self.algorithm}"


class HasherRegistry(Mapping[str, PasswordHasherPort]):
    """Read-only algorithm name to hasher mapping built once at startup."""

    def __init__(self, hashers: Iterable[PasswordHasherPort]) -> None:
        by_algorithm: dict[str, PasswordHasherPort] = {}
        for hasher in hashers:
            if hasher.algorithm in by_algorithm:
                raise ValueError(f"duplicate hasher algorithm: {hasher.algorithm!r}")
            by_algorithm[hasher.algorithm] = hasher
        self._hashers = MappingProxyType(by_algorithm)

    def __getitem__(self, algorithm: str) -> PasswordHasherPort:
        return self._hashers[algorithm]

    def __iter__(self) -> Iterator[str]:
        return iter(self._hashers)

    def __len__(self) -> int:
        return len(self._hashers)

    def hasher_for(self, algorithm: str) -> PasswordHasherPort:
        """Return the hasher registered for ``algorithm`` or raise."""

        hasher = self._hashers.get(algorithm)
        if hasher is None:
            raise UnknownHasherAlgorithmError(algorithm)
        return hasher

    def hasher_for_encoded(self, encoded: str) -> PasswordHasherPort | None:
        """Route a credential string to its hasher; None when it is malformed.

        Raises ``UnknownHasherAlgorithmError`` for a well-shaped credential
        naming an algorithm that is not registered.
        """

        fields = split_encoded_credential(encoded=encoded)
        if fields is None:
            return None
        return self.hasher_for(fields[0])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._hashers)!r})"
