"""Application password service dispatching credentials to registered hashers."""

from __future__ import annotations

import logging

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort
from credential_hasher.application.services.hasher_registry import (
    HasherRegistry,
    UnknownHasherAlgorithmError,
)
from credential_hasher.domain.encoded_credential import parse_encoded_credential

logger = logging.getLogger(__name__)


class PasswordService:
    """Create, check and audit stored password credentials."""

    def __init__(self, *, registry: HasherRegistry, default_algorithm: str) -> None:
        self._registry = registry
        self._default_hasher = registry.hasher_for(default_algorithm)

    @property
    def default_hasher(self) -> PasswordHasherPort:
        return self._default_hasher

    def make_password(self, password: str) -> str:
        """Encode password with a fresh salt using the default hasher."""

        hasher = self._default_hasher
        encoded = hasher.encode(password, hasher.salt())
        logger.debug("password_encoded algorithm=%s", hasher.algorithm)
        return encoded

    def check_password(self, *, password: str, encoded: str) -> bool:
        """Verify password against a credential produced by any registered hasher."""

        try:
            hasher = self._registry.hasher_for_encoded(encoded)
        except UnknownHasherAlgorithmError as error:
            logger.warning("credential_unknown_algorithm algorithm=%s", error.algorithm)
            return False
        if hasher is None:
            logger.warning("credential_format_mismatch")
            return False

        return hasher.verify(password=password, encoded=encoded)

    def needs_rehash(self, encoded: str) -> bool:
        """Return whether credential should be re-encoded with the default hasher."""

        credential = parse_encoded_credential(encoded=encoded)
        if credential is None:
            return True
        if credential.algorithm != self._default_hasher.algorithm:
            return True
        return credential.iterations != self._default_hasher.iterations
