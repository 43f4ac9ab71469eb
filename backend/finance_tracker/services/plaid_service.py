"""Plaid API service wrapper."""

from datetime import datetime, timezone

import plaid
from plaid.api import plaid_api
from plaid.exceptions import ApiException
from plaid.model.link_token_create_request import LinkTokenCreateRequest
from plaid.model.link_token_create_request_user import LinkTokenCreateRequestUser
from plaid.model.item_public_token_exchange_request import ItemPublicTokenExchangeRequest
from plaid.model.country_code import CountryCode
from plaid.model.products import Products

from finance_tracker.config import get_settings
from finance_tracker.exceptions import PlaidNotConfiguredError, TokenExchangeError
from finance_tracker.logging_config import get_logger


logger = get_logger("plaid")


def _get_plaid_client() -> plaid_api.PlaidApi:
    """Create a Plaid API client."""
    settings = get_settings()

    if not settings.plaid_configured:
        raise PlaidNotConfiguredError("Plaid credentials are not configured")

    env_map = {
        "sandbox": plaid.Environment.Sandbox,
        "production": plaid.Environment.Production,
    }

    host = env_map.get(settings.plaid_env)
    if host is None:
        logger.warning("Unknown PLAID_ENV %r, using sandbox", settings.plaid_env)
        host = plaid.Environment.Sandbox

    configuration = plaid.Configuration(
        host=host,
        api_key={
            "clientId": settings.plaid_client_id,
            "secret": settings.plaid_secret,
        },
    )

    api_client = plaid.ApiClient(configuration)
    return plaid_api.PlaidApi(api_client)


def create_link_token(user_id: str) -> dict:
    """
    Create a Plaid Link token for the frontend.

    Args:
        user_id: The authenticated user's ID.

    Returns:
        Dict with link_token and expiration.

    Raises:
        PlaidNotConfiguredError: If Plaid credentials are missing.
    """
    settings = get_settings()
    client = _get_plaid_client()

    request = LinkTokenCreateRequest(
        user=LinkTokenCreateRequestUser(client_user_id=user_id),
        client_name=settings.app_name,
        products=[Products(product) for product in settings.plaid_products],
        country_codes=[CountryCode("US")],
        language="en",
    )

    response = client.link_token_create(request)
    logger.info("Created link token for user %s", user_id)
    return {
        "link_token": response.link_token,
        "expiration": response.expiration,
    }


def exchange_public_token(public_token: str) -> dict:
    """
    Exchange a Plaid public token for an access token and item ID.

    Args:
        public_token: The public token from Plaid Link.

    Returns:
        Dict with access_token and item_id.

    Raises:
        PlaidNotConfiguredError: If Plaid credentials are missing.
        TokenExchangeError: If Plaid rejects the token.
    """
    client = _get_plaid_client()

    request = ItemPublicTokenExchangeRequest(public_token=public_token)
    try:
        response = client.item_public_token_exchange(request)
    except ApiException as e:
        logger.error("Public token exchange failed: %s", e.reason)
        raise TokenExchangeError(f"Plaid token exchange failed: {e.reason}") from e

    return {
        "access_token": response.access_token,
        "item_id": response.item_id,
    }


class PlaidLinkProvider:
    """Link provider backed by a token issued through ``create_link_token``.

    ``open`` hands the token to the client, which runs Plaid Link in the
    browser and posts the resulting callbacks back to the API.
    """

    def __init__(self, link_token: str, expiration: datetime | None = None):
        self.link_token = link_token
        self.expiration = expiration
        self.opened = False

    @property
    def ready(self) -> bool:
        """True when the token was issued by us and has not expired."""
        if self.expiration is None:
            return False
        expiration = self.expiration
        if expiration.tzinfo is None:
            expiration = expiration.replace(tzinfo=timezone.utc)
        return expiration > datetime.now(timezone.utc)

    def open(self) -> None:
        self.opened = True
        logger.info("Plaid Link opened")
