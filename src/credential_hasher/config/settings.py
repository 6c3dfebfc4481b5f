"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

IterationCount = Annotated[int, Field(gt=0, le=2**31 - 1)]


class Settings(BaseSettings):
    """Environment-driven password hashing settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    password_hasher_default_algorithm: Literal["pbkdf2_sha256", "pbkdf2_sha1"] = Field(
        default="pbkdf2_sha256",
        validation_alias="PASSWORD_HASHER_DEFAULT_ALGORITHM",
    )
    password_hasher_iterations: IterationCount = Field(
        default=260_000,
        validation_alias="PASSWORD_HASHER_ITERATIONS",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
