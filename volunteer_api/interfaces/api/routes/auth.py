"""Endpoints for account registration and login."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    get_user,
    register_user as register_user_uc,
)
from volunteer_api.domain.entities import Principal
from volunteer_api.infrastructure.database import get_db
from volunteer_api.infrastructure.security import create_access_token
from volunteer_api.interfaces.api.dependencies import get_current_principal
from volunteer_api.interfaces.api.schemas import (
    ApiResponse,
    LoginData,
    LoginRequest,
    RegisterRequest,
    UserRead,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post(
    "/register",
    response_model=ApiResponse[UserRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """Create a new account. Email addresses are stored lowercase."""

    user = register_user_uc(
        db,
        email=payload.email,
        password=payload.password,
        role=payload.role,
    )
    return ApiResponse(
        data=UserRead(id=user.id, email=user.email, role=user.role),
        message="Registration successful",
    )


@router.post(
    "/login",
    response_model=ApiResponse[LoginData],
    response_model_exclude_none=True,
)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """Exchange valid credentials for a bearer token."""

    user, auth_status = authenticate_user(db, payload.email, payload.password)
    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        logger.warning("Failed login attempt for %s", (payload.email or "").strip().lower())
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    return ApiResponse(
        data=LoginData(
            token=create_access_token(user),
            user=UserRead(id=user.id, email=user.email, role=user.role),
        ),
        message="Login successful",
    )


@router.get("/me", response_model=ApiResponse[UserRead], response_model_exclude_none=True)
def read_current_user(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    return ApiResponse(data=UserRead.model_validate(get_user(db, principal.user_id)))
