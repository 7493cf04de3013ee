# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_KEYS = ("dev", "development", "test", "")


class SessionConfig(BaseModel):
    cookie_name: str = "session"
    # 30 days
    lifetime_seconds: int = Field(60 * 60 * 24 * 30, ge=1)
    cookie_secure: bool = False
    cookie_samesite: str = "Lax"
    password_hash_method: str = "scrypt"

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("cookie_secure", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


class SecurityConfig(BaseModel):
    allowed_origins: list[str] = Field(
        ["http://moonshard.io", "http://equityone.org"]
    )

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


def _session_config_factory() -> SessionConfig:
    return SessionConfig()


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    bind_address: str = Field(":8000", alias="BIND_ADDRESS")
    log_level: str = Field("debug", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    database_url: str = Field("sqlite:///userauth.db", alias="DATABASE_URL")
    database_pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    database_pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    session_key: str = Field("dev", alias="SESSION_KEY")

    session: SessionConfig = Field(default_factory=_session_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        validate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.session_key in _INSECURE_KEYS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure SESSION_KEY detected in production!\n"
                "   SESSION_KEY signs every session cookie and must be a strong random value.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if not self.session.cookie_secure:
            print(
                "\n⚠️  PRODUCTION SECURITY WARNING: session cookie Secure flag is DISABLED (use HTTPS!)\n",
                file=sys.stderr,
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def bind_host_port(self) -> tuple[str, int]:
        host, _, port = self.bind_address.rpartition(":")
        return host or "0.0.0.0", int(port)


def read_config_file(config_path: str | Path) -> dict[str, Any]:
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"config file not found: {path}")
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _to_aliases(data: dict[str, Any]) -> dict[str, Any]:
    resolved: dict[str, Any] = {}
    for key, value in data.items():
        field = AppConfig.model_fields.get(key)
        resolved[(field.alias or key) if field else key] = value
    return resolved


@lru_cache(maxsize=4)
def load_config(config_path: str | None = None) -> AppConfig:
    if config_path is None:
        return AppConfig()  # type: ignore[call-arg]
    return AppConfig(**_to_aliases(read_config_file(config_path)))


__all__ = ["AppConfig", "SecurityConfig", "SessionConfig", "load_config", "read_config_file"]
