"""Mock transaction data and filtering."""

from datetime import date
from decimal import Decimal


ALL_CATEGORIES = "All Categories"
ALL_ACCOUNTS = "All Accounts"

MOCK_TRANSACTIONS = [
    {"id": 1, "name": "Grocery Store", "amount": Decimal("-82.45"), "date": date(2023, 8, 15), "category": "Groceries", "account": "Main Account"},
    {"id": 2, "name": "Salary Deposit", "amount": Decimal("2800.00"), "date": date(2023, 8, 14), "category": "Income", "account": "Main Account"},
    {"id": 3, "name": "Netflix Subscription", "amount": Decimal("-15.99"), "date": date(2023, 8, 13), "category": "Entertainment", "account": "Credit Card"},
    {"id": 4, "name": "Restaurant Payment", "amount": Decimal("-42.50"), "date": date(2023, 8, 12), "category": "Dining", "account": "Credit Card"},
    {"id": 5, "name": "Amazon Purchase", "amount": Decimal("-67.23"), "date": date(2023, 8, 11), "category": "Shopping", "account": "Credit Card"},
    {"id": 6, "name": "Gas Station", "amount": Decimal("-45.00"), "date": date(2023, 8, 10), "category": "Transport", "account": "Main Account"},
    {"id": 7, "name": "Electricity Bill", "amount": Decimal("-85.20"), "date": date(2023, 8, 9), "category": "Utilities", "account": "Main Account"},
    {"id": 8, "name": "Gym Membership", "amount": Decimal("-29.99"), "date": date(2023, 8, 8), "category": "Health & Fitness", "account": "Credit Card"},
    {"id": 9, "name": "Freelance Work", "amount": Decimal("350.00"), "date": date(2023, 8, 7), "category": "Income", "account": "Main Account"},
    {"id": 10, "name": "Phone Bill", "amount": Decimal("-55.00"), "date": date(2023, 8, 6), "category": "Utilities", "account": "Credit Card"},
    {"id": 11, "name": "Coffee Shop", "amount": Decimal("-4.75"), "date": date(2023, 8, 5), "category": "Dining", "account": "Main Account"},
    {"id": 12, "name": "Clothing Store", "amount": Decimal("-95.50"), "date": date(2023, 8, 4), "category": "Shopping", "account": "Credit Card"},
]


def list_categories() -> list[str]:
    """Distinct categories in first-seen order."""
    return list(dict.fromkeys(txn["category"] for txn in MOCK_TRANSACTIONS))


def list_accounts() -> list[str]:
    return list(dict.fromkeys(txn["account"] for txn in MOCK_TRANSACTIONS))


def list_transactions(
    category: str | None = None,
    account: str | None = None,
    search: str | None = None,
) -> list[dict]:
    """
    Filter the mock transactions.

    ``All Categories`` / ``All Accounts`` behave like no filter. ``search`` is a
    case-insensitive substring match on the transaction name.
    """
    results = MOCK_TRANSACTIONS

    if category and category != ALL_CATEGORIES:
        results = [txn for txn in results if txn["category"] == category]

    if account and account != ALL_ACCOUNTS:
        results = [txn for txn in results if txn["account"] == account]

    if search:
        needle = search.lower()
        results = [txn for txn in results if needle in txn["name"].lower()]

    return list(results)
