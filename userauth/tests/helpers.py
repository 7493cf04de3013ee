from __future__ import annotations

from userauth.shared.config import AppConfig

FAST_HASH_METHOD = "pbkdf2:sha256:1000"


def make_config(**overrides: object) -> AppConfig:
    values: dict[str, object] = {
        "APP_ENV": "test",
        "DATABASE_URL": "sqlite://",
        "SESSION_KEY": "test-session-key",
        "LOG_LEVEL": "warning",
        "session": {"password_hash_method": FAST_HASH_METHOD},
    }
    values.update(overrides)
    return AppConfig(**values)  # type: ignore[arg-type]
