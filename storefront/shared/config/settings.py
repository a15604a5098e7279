# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import timedelta
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "secret", "")


def _settings_config() -> SettingsConfigDict:
    return SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )


class TokenLifetime(str, Enum):
    FIFTEEN_MINUTES = "15m"
    ONE_HOUR = "1h"
    ONE_DAY = "24h"
    SEVEN_DAYS = "7d"

    @property
    def delta(self) -> timedelta:
        return _LIFETIME_DELTAS[self]


_LIFETIME_DELTAS = {
    TokenLifetime.FIFTEEN_MINUTES: timedelta(minutes=15),
    TokenLifetime.ONE_HOUR: timedelta(hours=1),
    TokenLifetime.ONE_DAY: timedelta(hours=24),
    TokenLifetime.SEVEN_DAYS: timedelta(days=7),
}


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///storefront.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _settings_config()


class CacheConfig(BaseSettings):
    backend: Literal["redis", "memory"] = Field("redis", alias="CACHE_BACKEND")
    redis_url: str = Field("redis://localhost:6379/0", alias="REDIS_URL")
    ttl_seconds: int = Field(3600, ge=1, alias="CACHE_TTL")
    socket_timeout: float = Field(2.0, ge=0.1, alias="REDIS_SOCKET_TIMEOUT")

    model_config = _settings_config()


class JwtConfig(BaseSettings):
    secret: str = Field("dev", alias="JWT_SECRET")
    expires_in: TokenLifetime = Field(TokenLifetime.ONE_DAY, alias="JWT_EXPIRES_IN")

    model_config = _settings_config()


class PasswordConfig(BaseSettings):
    hash_method: str = Field("pbkdf2:sha256:600000", alias="PASSWORD_HASH_METHOD")
    salt_length: int = Field(16, ge=8, alias="PASSWORD_SALT_LENGTH")

    model_config = _settings_config()


class LoggingConfig(BaseSettings):
    level: str = Field("INFO", alias="LOG_LEVEL")
    file: Path | None = Field(None, alias="LOG_FILE")
    debug: bool = Field(False, alias="DEBUG_LOGGING")

    model_config = _settings_config()

    @field_validator("debug", mode="before")
    @classmethod
    def _parse_debug(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _cache_config_factory() -> CacheConfig:
    return CacheConfig()  # type: ignore[call-arg]


def _jwt_config_factory() -> JwtConfig:
    return JwtConfig()  # type: ignore[call-arg]


def _password_config_factory() -> PasswordConfig:
    return PasswordConfig()  # type: ignore[call-arg]


def _logging_config_factory() -> LoggingConfig:
    return LoggingConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    service_name: str = Field("storefront", alias="SERVICE_NAME")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    cache: CacheConfig = Field(default_factory=_cache_config_factory)
    jwt: JwtConfig = Field(default_factory=_jwt_config_factory)
    password: PasswordConfig = Field(default_factory=_password_config_factory)
    logging: LoggingConfig = Field(default_factory=_logging_config_factory)

    model_config = _settings_config()

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self
        if self.jwt.secret in _INSECURE_SECRETS:
            raise ValueError("JWT_SECRET must be a strong random value in production")
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "CacheConfig",
    "DatabaseConfig",
    "JwtConfig",
    "LoggingConfig",
    "PasswordConfig",
    "TokenLifetime",
    "load_config",
]
