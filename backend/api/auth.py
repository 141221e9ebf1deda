"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from backend.api.dependencies import get_current_user, get_user_store
from backend.errors import AuthError, ConflictError, ValidationError
from backend.models.user import User
from backend.schemas.auth import (
    AuthResponse,
    ErrorResponse,
    HomeResponse,
    LoginRequest,
    ProfileResponse,
    SignupRequest,
    UserResponse,
)
from backend.services.tokens import issue_token
from backend.services.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def signup(
    store: Annotated[UserStore, Depends(get_user_store)],
    payload: SignupRequest | None = None,
):
    """Register a new user."""
    payload = payload or SignupRequest()
    if not payload.name or not payload.email or not payload.password:
        raise ValidationError("Name, email, and password required")

    # No await between the check and the append
    if store.find_by_email(payload.email.lower()):
        logger.debug(f"Signup rejected, email taken: {payload.email}")
        raise ConflictError("User already exists")

    user = store.append(payload.name, payload.email, payload.password)

    return AuthResponse(
        message="User created",
        user=UserResponse.model_validate(user),
        token=issue_token(user.email),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def login(
    store: Annotated[UserStore, Depends(get_user_store)],
    credentials: LoginRequest | None = None,
):
    """Login with email and password."""
    credentials = credentials or LoginRequest()
    if not credentials.email or not credentials.password:
        raise ValidationError("Email and password required")

    user = store.find_by_credentials(credentials.email.lower(), credentials.password)
    if not user:
        logger.debug(f"Login failed for {credentials.email}")
        raise AuthError("Invalid credentials")

    return AuthResponse(
        message="Logged in",
        user=UserResponse.model_validate(user),
        token=issue_token(user.email),
    )


@router.get("/home", response_model=HomeResponse, responses={401: {"model": ErrorResponse}})
async def home(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Greet the user identified by the bearer token."""
    return HomeResponse(
        message=f"Welcome back, {current_user.name}!",
        user=ProfileResponse.model_validate(current_user),
    )
