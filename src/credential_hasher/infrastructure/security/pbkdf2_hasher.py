"""PBKDF2 password hasher adapter."""

from __future__ import annotations

import base64
import hashlib
import hmac
from dataclasses import dataclass

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort
from credential_hasher.domain.encoded_credential import (
    CREDENTIAL_DELIMITER,
    MAX_ITERATIONS,
    EncodedCredential,
    ensure_salt_embeddable,
    parse_iterations,
    split_encoded_credential,
)
from credential_hasher.domain.salt import generate_salt

DERIVED_KEY_LENGTH = 32
DEFAULT_ITERATIONS = 260_000


@dataclass(frozen=True)
class Pbkdf2HasherConfig:
    """Immutable algorithm/digest/work-factor configuration for one hasher."""

    algorithm: str
    iterations: int
    digest: str

    def __post_init__(self) -> None:
        if not self.algorithm or CREDENTIAL_DELIMITER in self.algorithm:
            raise ValueError(f"invalid hasher algorithm name: {self.algorithm!r}")
        if (
            isinstance(self.iterations, bool)
            or not isinstance(self.iterations, int)
            or not 1 <= self.iterations <= MAX_ITERATIONS
        ):
            raise ValueError(f"hasher iterations must be an int in 1..{MAX_ITERATIONS}")
        try:
            hashlib.pbkdf2_hmac(self.digest, b"", b"", 1)
        except (TypeError, ValueError) as error:
            raise ValueError(f"unsupported digest: {self.digest!r}") from error


class Pbkdf2PasswordHasher(PasswordHasherPort):
    """Password hashing adapter using PBKDF2-HMAC with a fixed digest."""

    def __init__(self, config: Pbkdf2HasherConfig) -> None:
        self._config = config

    @property
    def config(self) -> Pbkdf2HasherConfig:
        return self._config

    @property
    def algorithm(self) -> str:
        return self._config.algorithm

    @property
    def iterations(self) -> int:
        return self._config.iterations

    def encode(self, password: str, salt: str) -> str:
        ensure_salt_embeddable(salt=salt)
        key = self._derive_key(
            password=password.encode("utf-8"),
            salt=salt.encode("utf-8"),
            iterations=self._config.iterations,
        )
        return EncodedCredential(
            algorithm=self._config.algorithm,
            iterations=self._config.iterations,
            salt=salt,
            key=key,
        ).to_string()

    def verify(self, *, password: str, encoded: str) -> bool:
        fields = split_encoded_credential(encoded=encoded)
        if fields is None:
            return False

        _, iterations_raw, salt, key = fields
        iterations = parse_iterations(raw=iterations_raw)
        try:
            password_bytes = password.encode("utf-8")
            salt_bytes = salt.encode("utf-8")
            key_bytes = key.encode("utf-8")
        except UnicodeEncodeError:
            # encode() can never have produced such a credential
            return False

        candidate = self._derive_key(password=password_bytes, salt=salt_bytes, iterations=iterations)
        return hmac.compare_digest(candidate.encode("ascii"), key_bytes)

    def salt(self) -> str:
        return generate_salt()

    def _derive_key(self, *, password: bytes, salt: bytes, iterations: int) -> str:
        derived = hashlib.pbkdf2_hmac(
            self._config.digest,
            password,
            salt,
            iterations,
            dklen=DERIVED_KEY_LENGTH,
        )
        return base64.b64encode(derived).decode("ascii")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(algorithm={self.algorithm!r}, iterations={self.iterations})"


PBKDF2_SHA256_CONFIG = Pbkdf2HasherConfig(
    algorithm="pbkdf2_sha256",
    iterations=DEFAULT_ITERATIONS,
    digest="sha256",
)
PBKDF2_SHA1_CONFIG = Pbkdf2HasherConfig(
    algorithm="pbkdf2_sha1",
    iterations=DEFAULT_ITERATIONS,
    digest="sha1",
)

PBKDF2_SHA256_HASHER = Pbkdf2PasswordHasher(PBKDF2_SHA256_CONFIG)
PBKDF2_SHA1_HASHER = Pbkdf2PasswordHasher(PBKDF2_SHA1_CONFIG)
