"""FastAPI dependency utilities for authentication and authorization."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from volunteer_api.application.access import ensure_admin, ensure_owner_or_admin
from volunteer_api.domain.entities import Principal
from volunteer_api.infrastructure.security import decode_access_token

TOKEN_REQUIRED_MESSAGE = "Access token required"
TOKEN_INVALID_MESSAGE = "Invalid or expired token"

bearer_scheme = HTTPBearer(auto_error=False)


def resolve_principal(token: str | None) -> Principal:
    """Return the caller identified by ``token``.

    A missing token is a 401; a token that fails verification is a 403.
    """

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=TOKEN_REQUIRED_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_access_token(token)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=TOKEN_INVALID_MESSAGE,
        ) from exc


def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Principal:
    """Return the authenticated caller from the bearer token."""

    return resolve_principal(credentials.credentials if credentials else None)


def require_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    """Ensure the authenticated caller has administrator privileges."""

    ensure_admin(principal)
    return principal


async def _read_body_field(request: Request, field: str) -> Any:
    body = await request.body()
    if not body:
        return None
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    return payload.get(field) if isinstance(payload, dict) else None


def _coerce_user_id(raw: Any) -> int:
    try:
        user_id = int(raw)
    except (TypeError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Valid user ID is required",
        ) from exc
    if isinstance(raw, bool) or user_id < 1:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Valid user ID is required",
        )
    return user_id


def require_owner_or_admin(
    field: str = "userId",
) -> Callable[..., Awaitable[int]]:
    """Build a dependency resolving the user that owns the requested resource.

    The owner id is read from the path, then the query string, then the JSON
    body. When none is given the caller's own id is used. Admins may act on
    any user; everyone else only on themselves. The dependency returns the
    resolved owner id.
    """

    async def dependency(
        request: Request,
        principal: Principal = Depends(get_current_principal),
    ) -> int:
        raw = request.path_params.get(field)
        if raw is None:
            raw = request.query_params.get(field)
        if raw is None:
            raw = await _read_body_field(request, field)

        owner_id = principal.user_id if raw in (None, "") else _coerce_user_id(raw)
        ensure_owner_or_admin(principal, owner_id)
        return owner_id

    return dependency


__all__ = [
    "bearer_scheme",
    "get_current_principal",
    "require_admin",
    "require_owner_or_admin",
    "resolve_principal",
]
