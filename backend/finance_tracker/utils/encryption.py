"""Encryption utilities for sensitive data."""

from cryptography.fernet import Fernet

from finance_tracker.config import get_settings
from finance_tracker.exceptions import ConfigurationError


def get_cipher() -> Fernet:
    """Get Fernet cipher instance using the encryption key from settings."""
    settings = get_settings()
    if not settings.encryption_key:
        raise ConfigurationError("Encryption key is not configured")
    return Fernet(settings.encryption_key.encode())


def encrypt_token(token: str) -> str:
    """Encrypt a token (e.g., Plaid access token).

    Args:
        token: Plain text token to encrypt

    Returns:
        Encrypted token as a string
    """
    cipher = get_cipher()
    return cipher.encrypt(token.encode()).decode()

