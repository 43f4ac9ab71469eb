"""API routers."""

from finance_tracker.routers.accounts import router as accounts_router
from finance_tracker.routers.auth import router as auth_router
from finance_tracker.routers.dashboard import router as dashboard_router
from finance_tracker.routers.link import router as link_router
from finance_tracker.routers.notifications import router as notifications_router
from finance_tracker.routers.plaid import router as plaid_router
from finance_tracker.routers.transactions import router as transactions_router

__all__ = [
    "accounts_router",
    "auth_router",
    "dashboard_router",
    "link_router",
    "notifications_router",
    "plaid_router",
    "transactions_router",
]
