# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from userauth.shared.logging import logger


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    """One session per repository call: commit on exit, roll back on error."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception as exc:
        logger.debug(f"uow: rollback after {type(exc).__name__}")
        session.rollback()
        raise
    finally:
        session.close()


__all__ = ["unit_of_work_scope"]
