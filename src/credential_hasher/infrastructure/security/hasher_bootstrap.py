"""Composition root wiring settings, hashers, registry and password service."""

from __future__ import annotations

import logging
from dataclasses import replace

from credential_hasher.application.services.hasher_registry import HasherRegistry
from credential_hasher.application.services.password_service import PasswordService
from credential_hasher.config.settings import Settings, load_settings
from credential_hasher.infrastructure.security.pbkdf2_hasher import (
    PBKDF2_SHA1_HASHER,
    PBKDF2_SHA256_HASHER,
    Pbkdf2PasswordHasher,
)

logger = logging.getLogger(__name__)

DEFAULT_HASHERS = (PBKDF2_SHA256_HASHER, PBKDF2_SHA1_HASHER)


def build_default_hasher_registry() -> HasherRegistry:
    """Build registry holding the preconfigured PBKDF2 hashers."""

    return HasherRegistry(DEFAULT_HASHERS)


def build_hasher_registry(*, iterations: int) -> HasherRegistry:
    """Build registry whose hashers encode with ``iterations``."""

    hashers = [
        hasher
        if hasher.iterations == iterations
        else Pbkdf2PasswordHasher(replace(hasher.config, iterations=iterations))
        for hasher in DEFAULT_HASHERS
    ]
    return HasherRegistry(hashers)


def build_password_service(settings: Settings | None = None) -> PasswordService:
    """Build password service from runtime settings."""

    runtime_settings = settings if settings is not None else load_settings()

    registry = build_hasher_registry(iterations=runtime_settings.password_hasher_iterations)
    logger.info(
        "password_service_configured default_algorithm=%s iterations=%s algorithms=%s",
        runtime_settings.password_hasher_default_algorithm,
        runtime_settings.password_hasher_iterations,
        ",".join(registry),
    )
    return PasswordService(
        registry=registry,
        default_algorithm=runtime_settings.password_hasher_default_algorithm,
    )
