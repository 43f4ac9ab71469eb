"""Authentication service with bcrypt passwords and JWT access tokens."""

import uuid
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from finance_tracker.config import Settings, get_settings
from finance_tracker.database import Database
from finance_tracker.exceptions import AuthError, UserExistsError


REFRESH_TOKEN_TYPE = "refresh"


def public_user(user: dict) -> dict:
    """Strip private fields from a stored user."""
    return {
        "id": user["id"],
        "email": user["email"],
        "first_name": user["first_name"],
        "last_name": user["last_name"],
        "created_at": user["created_at"],
    }


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: Database, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()

    def signup(self, email: str, password: str, first_name: str, last_name: str) -> dict:
        """
        Register a new user.

        Args:
            email: User's email
            password: User's password
            first_name: User's first name
            last_name: User's last name

        Returns:
            Dict with the access token and public user info

        Raises:
            UserExistsError: If the email is already registered
        """
        if self.db.get_user_by_email(email) is not None:
            raise UserExistsError("Email already registered")

        password_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()
        user = self.db.create_user({
            "email": email,
            "password_hash": password_hash,
            "first_name": first_name,
            "last_name": last_name,
        })

        return self._token_response(user)

    def login(self, email: str, password: str) -> dict:
        """
        Log in a user.

        Raises:
            AuthError: If the email is unknown or the password is wrong
        """
        user = self.db.get_user_by_email(email)
        if user is None or not bcrypt.checkpw(password.encode(), user["password_hash"].encode()):
            raise AuthError("Invalid email or password")

        return self._token_response(user)

    def create_access_token(self, user: dict) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user["id"],
            "user_id": user["id"],
            "email": user["email"],
            "iss": self.settings.jwt_issuer,
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(minutes=self.settings.jwt_expiration_minutes),
        }
        return jwt.encode(payload, self.settings.jwt_secret, algorithm="HS256")

    def create_refresh_token(self, user: dict) -> str:
        """Long-lived token that can only be traded for a new token pair."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user["id"],
            "iss": self.settings.jwt_issuer,
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(days=self.settings.jwt_refresh_expiration_days),
            "jti": str(uuid.uuid4()),
            "type": REFRESH_TOKEN_TYPE,
        }
        return jwt.encode(payload, self.settings.jwt_secret, algorithm="HS256")

    def decode_access_token(self, token: str) -> dict:
        """
        Validate an access token and return its claims.

        Raises:
            AuthError: If the token is expired, invalid or a refresh token
        """
        payload = self._decode(token)
        if payload.get("type") == REFRESH_TOKEN_TYPE:
            raise AuthError("Invalid token: refresh tokens cannot authorize requests")
        return payload

    def refresh(self, refresh_token: str) -> dict:
        """
        Trade a refresh token for a new access and refresh token pair.

        Raises:
            AuthError: If the token is not a valid refresh token or the user
                no longer exists
        """
        payload = self._decode(refresh_token)
        if payload.get("type") != REFRESH_TOKEN_TYPE:
            raise AuthError("Invalid refresh token")

        user = self.db.get_user_by_id(payload.get("sub", ""))
        if user is None:
            raise AuthError("User not found")
        return self._token_response(user)

    def _decode(self, token: str) -> dict:
        try:
            return jwt.decode(
                token,
                self.settings.jwt_secret,
                algorithms=["HS256"],
                issuer=self.settings.jwt_issuer,
            )
        except jwt.ExpiredSignatureError:
            raise AuthError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise AuthError(f"Invalid token: {str(e)}")

    def get_user_by_token(self, token: str) -> dict:
        """
        Resolve the user an access token belongs to.

        Raises:
            AuthError: If the token is invalid or the user no longer exists
        """
        payload = self.decode_access_token(token)
        user = self.db.get_user_by_id(payload.get("sub", ""))
        if user is None:
            raise AuthError("User not found")
        return user

    def _token_response(self, user: dict) -> dict:
        return {
            "access_token": self.create_access_token(user),
            "refresh_token": self.create_refresh_token(user),
            "expires_in": self.settings.jwt_expiration_minutes * 60,
            "user": public_user(user),
        }
