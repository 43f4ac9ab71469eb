"""Caller-owned list of linked accounts and record construction."""

import random
import threading
import time
from datetime import date
from decimal import Decimal

from finance_tracker.exceptions import AccountNotFoundError
from finance_tracker.schemas.account import (
    AccountSummary,
    DEFAULT_LINKED_BALANCE,
    LinkedAccountRecord,
)
from finance_tracker.schemas.link import LinkMetadata


DEFAULT_INSTITUTION_NAME = "Connected Bank"
CREDIT_ACCOUNT_TYPE = "credit"

_id_lock = threading.Lock()
_last_id_millis = 0


def new_account_id() -> str:
    """
    Generate a time-based account ID.

    IDs are ``acc_<epoch millis>``. Two calls in the same millisecond get
    consecutive values, so IDs issued by one process never collide.
    """
    global _last_id_millis

    with _id_lock:
        millis = int(time.time() * 1000)
        if millis <= _last_id_millis:
            millis = _last_id_millis + 1
        _last_id_millis = millis

    return f"acc_{millis}"


def mask_account_number(rng: random.Random | None = None) -> str:
    """Return a masked account number with a random 4-digit suffix."""
    rng = rng or random
    return "****" + str(rng.randint(1000, 9999))


def build_linked_account(
    metadata: LinkMetadata,
    today: date | None = None,
    rng: random.Random | None = None,
) -> LinkedAccountRecord:
    """
    Build the record for a freshly linked account.

    Args:
        metadata: Provider metadata; only the institution name is used.
        today: Override for the last-updated date.
        rng: Random source for the masked account suffix.

    Returns:
        A new LinkedAccountRecord with the default balance.
    """
    institution = metadata.institution_name or DEFAULT_INSTITUTION_NAME

    return LinkedAccountRecord(
        id=new_account_id(),
        name=f"{institution} Account",
        type="checking",
        institution=institution,
        balance=DEFAULT_LINKED_BALANCE,
        last_updated=today or date.today(),
        account_number=mask_account_number(rng),
        connected=True,
    )


def demo_accounts() -> list[LinkedAccountRecord]:
    """Accounts every new dashboard starts with."""
    return [
        LinkedAccountRecord(
            id="acc_1234",
            name="Chase Checking",
            type="checking",
            institution="Chase",
            balance=Decimal("4532.78"),
            last_updated=date(2023, 8, 15),
            account_number="****5678",
        ),
        LinkedAccountRecord(
            id="acc_5678",
            name="Bank of America Savings",
            type="savings",
            institution="Bank of America",
            balance=Decimal("12500.25"),
            last_updated=date(2023, 8, 15),
            account_number="****9012",
        ),
        LinkedAccountRecord(
            id="acc_9012",
            name="Discover Credit Card",
            type=CREDIT_ACCOUNT_TYPE,
            institution="Discover",
            balance=Decimal("-1245.63"),
            last_updated=date(2023, 8, 14),
            account_number="****3456",
        ),
    ]


class AccountBook:
    """In-memory list of a single user's linked accounts."""

    def __init__(self, accounts: list[LinkedAccountRecord] | None = None):
        self._accounts: list[LinkedAccountRecord] = list(accounts or [])

    def __len__(self) -> int:
        return len(self._accounts)

    def list_accounts(self) -> list[LinkedAccountRecord]:
        return list(self._accounts)

    def get(self, account_id: str) -> LinkedAccountRecord:
        for account in self._accounts:
            if account.id == account_id:
                return account
        raise AccountNotFoundError(f"Account {account_id} not found")

    def append(self, record: LinkedAccountRecord) -> LinkedAccountRecord:
        self._accounts.append(record)
        return record

    def disconnect(self, account_id: str) -> LinkedAccountRecord:
        """Remove an account and return it."""
        account = self.get(account_id)
        self._accounts = [a for a in self._accounts if a.id != account_id]
        return account

    def refresh(self, account_id: str, today: date | None = None) -> LinkedAccountRecord:
        """Stamp an account as updated today."""
        account = self.get(account_id)
        account.last_updated = today or date.today()
        return account

    def summary(self) -> AccountSummary:
        """
        Compute dashboard totals.

        Credit accounts are excluded from the total balance and reported
        separately as an absolute debt figure.
        """
        deposits = [a for a in self._accounts if a.type != CREDIT_ACCOUNT_TYPE]
        credit = [a for a in self._accounts if a.type == CREDIT_ACCOUNT_TYPE]

        return AccountSummary(
            total_balance=sum((a.balance for a in deposits), Decimal("0")),
            deposit_account_count=len(deposits),
            credit_debt=abs(sum((a.balance for a in credit), Decimal("0"))),
            credit_account_count=len(credit),
            institution_count=len({a.institution for a in self._accounts}),
        )
