"""In-memory data store."""

import uuid
from datetime import datetime, timezone
from functools import lru_cache

from finance_tracker.config import get_settings
from finance_tracker.services.accounts import AccountBook, demo_accounts


class Database:
    """Database helper class for Finance Tracker operations.

    Everything lives in process memory and is lost on restart.
    """

    def __init__(self, seed_demo_data: bool = True):
        self.seed_demo_data = seed_demo_data
        self._users: dict[str, dict] = {}
        self._plaid_items: dict[str, dict] = {}
        self._link_tokens: dict[tuple[str, str], dict] = {}
        self._account_books: dict[str, AccountBook] = {}

    # --- Users ---

    def get_user_by_id(self, user_id: str) -> dict | None:
        return self._users.get(user_id)

    def get_user_by_email(self, email: str) -> dict | None:
        email = email.lower()
        for user in self._users.values():
            if user["email"] == email:
                return user
        return None

    def create_user(self, user_data: dict) -> dict:
        user = {
            "id": str(uuid.uuid4()),
            "created_at": datetime.now(timezone.utc),
            **user_data,
        }
        user["email"] = user["email"].lower()
        self._users[user["id"]] = user
        return user

    # --- Link tokens ---

    def save_link_token(self, user_id: str, link_token: str, expiration: datetime) -> dict:
        record = {
            "user_id": user_id,
            "link_token": link_token,
            "expiration": expiration,
        }
        self._link_tokens[(user_id, link_token)] = record
        return record

    def get_link_token(self, user_id: str, link_token: str) -> dict | None:
        return self._link_tokens.get((user_id, link_token))

    # --- Plaid items ---

    def create_plaid_item(self, item_data: dict) -> dict:
        now = datetime.now(timezone.utc)
        item = {
            "id": str(uuid.uuid4()),
            "created_at": now,
            "updated_at": now,
            **item_data,
        }
        self._plaid_items[item["id"]] = item
        return item

    def get_user_plaid_items(self, user_id: str) -> list[dict]:
        return [
            item for item in self._plaid_items.values()
            if item["user_id"] == user_id
        ]

    # --- Accounts ---

    def get_account_book(self, user_id: str) -> AccountBook:
        """Get a user's account book, creating (and seeding) it on first use."""
        book = self._account_books.get(user_id)
        if book is None:
            book = AccountBook(demo_accounts() if self.seed_demo_data else None)
            self._account_books[user_id] = book
        return book


@lru_cache
def get_db() -> Database:
    """Dependency for getting the process-wide data store."""
    return Database(seed_demo_data=get_settings().seed_demo_data)
