"""
Authentication Handler

Handles registration, login and the current user's profile.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses
- Handle HTTP-specific errors

Business logic belongs in the SERVICE layer, not here.

Status Codes:
=============
Registration and login failures are all reported as 400, which is what
the frontend expects: duplicate account, unknown email, wrong password.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from folio.shared.schemas.common import CreatedResponse
from folio.shared.schemas.user import (
    LoginResponse,
    SessionUser,
    UserCreate,
    UserLogin,
    UserResponse,
)
from folio.shared.services.auth_service import AuthService
from folio.shared.core.exceptions import (
    DuplicateResourceError,
    InvalidCredentialError,
    UserNotFoundError,
)
from folio.api.dependencies import CurrentUser
from folio.api.dependencies.services import get_auth_service


router = APIRouter()


@router.post(
    "/register",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user with role "user".

    Raises:
        400: Username or email already registered, or invalid input
    """
    try:
        user = await auth_service.register_user(
            username=user_data.username,
            email=user_data.email,
            password=user_data.password,
        )
    except DuplicateResourceError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return CreatedResponse(message="User registered successfully", id=user.id)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and return a session token.

    Raises:
        400: Unknown email ("User not found") or wrong password ("Invalid password")
    """
    try:
        user, token = await auth_service.login_user(
            email=credentials.email,
            password=credentials.password,
        )
    except UserNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User not found",
        )
    except InvalidCredentialError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return LoginResponse(token=token, user=SessionUser.model_validate(user))


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Profile of the token's user.

    Raises:
        404: The user was deleted after the token was issued
    """
    return await auth_service.get_profile(current_user.user_id)
