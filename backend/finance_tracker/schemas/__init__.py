"""Pydantic schemas for request/response validation."""

from finance_tracker.schemas.common import (
    SuccessResponse,
    ErrorResponse,
)
from finance_tracker.schemas.auth import (
    SignupRequest,
    LoginRequest,
    RefreshTokenRequest,
    UserResponse,
    TokenResponse,
)
from finance_tracker.schemas.account import (
    LinkedAccountRecord,
    AccountSummary,
)
from finance_tracker.schemas.link import (
    ButtonVariant,
    LinkState,
    LinkMode,
    Institution,
    LinkAccountMeta,
    LinkMetadata,
    LinkSessionRequest,
    LinkSuccessRequest,
    LinkExitRequest,
    LinkEventRequest,
    LinkButtonView,
    LinkSessionResponse,
)
from finance_tracker.schemas.plaid import (
    LinkTokenResponse,
    ExchangeTokenRequest,
    ExchangeTokenResponse,
    PlaidItemResponse,
)
from finance_tracker.schemas.notification import (
    Notification,
    NotificationLevel,
)
from finance_tracker.schemas.transaction import (
    TransactionResponse,
    TransactionListResponse,
)
from finance_tracker.schemas.dashboard import (
    CategorySpending,
    DashboardOverview,
)

__all__ = [
    # Common
    "SuccessResponse",
    "ErrorResponse",
    # Auth
    "SignupRequest",
    "LoginRequest",
    "RefreshTokenRequest",
    "UserResponse",
    "TokenResponse",
    # Accounts
    "LinkedAccountRecord",
    "AccountSummary",
    # Link flow
    "ButtonVariant",
    "LinkState",
    "LinkMode",
    "Institution",
    "LinkAccountMeta",
    "LinkMetadata",
    "LinkSessionRequest",
    "LinkSuccessRequest",
    "LinkExitRequest",
    "LinkEventRequest",
    "LinkButtonView",
    "LinkSessionResponse",
    # Plaid
    "LinkTokenResponse",
    "ExchangeTokenRequest",
    "ExchangeTokenResponse",
    "PlaidItemResponse",
    # Notifications
    "Notification",
    "NotificationLevel",
    # Transactions
    "TransactionResponse",
    "TransactionListResponse",
    # Dashboard
    "CategorySpending",
    "DashboardOverview",
]
