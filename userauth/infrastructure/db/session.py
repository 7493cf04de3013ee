# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from userauth.shared.config import AppConfig
from userauth.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def create_db_engine(config: AppConfig) -> Engine:
    url = config.database_url
    kwargs: dict[str, Any] = {"echo": False, "future": True, "pool_pre_ping": True}

    if url.startswith("sqlite"):
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": int(config.database_pool_timeout),
        }

    if _is_memory_sqlite(url):
        # one shared connection, or every checkout would see an empty database
        kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_size=config.database_pool_size,
            max_overflow=config.database_max_overflow,
            pool_timeout=config.database_pool_timeout,
        )

    engine = create_engine(url, **kwargs)
    logger.info(f"db.engine: created for backend={engine.url.get_backend_name()}")
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    # models must be imported so their tables are registered on Base.metadata
    from userauth.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured")
