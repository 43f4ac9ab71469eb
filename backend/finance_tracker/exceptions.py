"""Domain exceptions.

Routers translate these into HTTP responses; services raise them.
"""

from fastapi import status


class FinanceTrackerError(Exception):
    """Base class for application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(FinanceTrackerError):
    """Invalid credentials or token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class UserExistsError(FinanceTrackerError):
    """Email is already registered."""

    status_code = status.HTTP_409_CONFLICT


class AccountNotFoundError(FinanceTrackerError):
    """No linked account with the given ID."""

    status_code = status.HTTP_404_NOT_FOUND


class LinkSessionNotFoundError(FinanceTrackerError):
    """No link session is waiting for provider callbacks."""

    status_code = status.HTTP_404_NOT_FOUND


class ConfigurationError(FinanceTrackerError):
    """A required setting is missing."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class PlaidNotConfiguredError(ConfigurationError):
    """Plaid credentials are not set."""


class TokenExchangeError(FinanceTrackerError):
    """Plaid rejected a public token exchange."""

    status_code = status.HTTP_502_BAD_GATEWAY
