"""Authentication router."""

from fastapi import APIRouter, Depends, HTTPException, status

from finance_tracker.database import Database, get_db
from finance_tracker.dependencies import get_current_user
from finance_tracker.exceptions import AuthError, UserExistsError
from finance_tracker.schemas.auth import (
    SignupRequest,
    LoginRequest,
    RefreshTokenRequest,
    TokenResponse,
    UserResponse,
)
from finance_tracker.services.auth_service import AuthService, public_user


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    db: Database = Depends(get_db),
):
    """
    Register a new user.

    Creates a new user account and returns an access token.
    """
    auth_service = AuthService(db)

    try:
        result = auth_service.signup(
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
    except UserExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message,
        )

    return TokenResponse(**result)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    db: Database = Depends(get_db),
):
    """
    Log in a user.

    Authenticates with email and password and returns an access token.
    """
    auth_service = AuthService(db)

    try:
        result = auth_service.login(
            email=request.email,
            password=request.password,
        )
    except AuthError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    return TokenResponse(**result)


@router.get("/me", response_model=UserResponse)
async def me(user: dict = Depends(get_current_user)):
    """Get the current user's profile."""
    return UserResponse(**public_user(user))


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    request: RefreshTokenRequest,
    db: Database = Depends(get_db),
):
    """Issue a new access and refresh token pair from a refresh token."""
    auth_service = AuthService(db)

    try:
        result = auth_service.refresh(request.refresh_token)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        )

    return TokenResponse(**result)
