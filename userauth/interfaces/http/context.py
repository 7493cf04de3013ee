# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from flask import g

from userauth.domain.users.entities import User
from userauth.domain.users.exceptions import NotAuthenticatedError

_CONTEXT_ATTR = "request_context"


@dataclass(slots=True)
class RequestContext:
    """Everything the pipeline attaches to one request."""

    request_id: str
    user: User | None = None


def bind_request_context(request_id: str) -> RequestContext:
    ctx = RequestContext(request_id=request_id)
    setattr(g, _CONTEXT_ATTR, ctx)
    return ctx


def get_request_context() -> RequestContext:
    ctx = g.get(_CONTEXT_ATTR)
    if not isinstance(ctx, RequestContext):
        raise RuntimeError("request context accessed before the request id hook ran")
    return ctx


def current_user() -> User:
    user = get_request_context().user
    if user is None:
        raise NotAuthenticatedError(context={"reason": "no_user_in_context"})
    return user


__all__ = ["RequestContext", "bind_request_context", "current_user", "get_request_context"]
