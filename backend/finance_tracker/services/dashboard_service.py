"""Dashboard overview built from the account book and transactions."""

from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP

from finance_tracker.schemas.account import AccountSummary
from finance_tracker.schemas.dashboard import CategorySpending, DashboardOverview
from finance_tracker.services import transaction_service


RECENT_TRANSACTION_LIMIT = 5

ZERO = Decimal("0")


def spending_by_category(transactions: list[dict]) -> list[CategorySpending]:
    """
    Group expenses by category, largest first.

    Percentages are whole numbers of the total spend, rounded half up.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        if txn["amount"] < 0:
            totals[txn["category"]] += -txn["amount"]

    spent = sum(totals.values(), ZERO)
    if not spent:
        return []

    return [
        CategorySpending(
            category=category,
            amount=amount,
            percentage=int((amount / spent * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)),
        )
        for category, amount in sorted(totals.items(), key=lambda item: item[1], reverse=True)
    ]


def build_overview(
    summary: AccountSummary,
    transactions: list[dict] | None = None,
) -> DashboardOverview:
    """
    Compute the dashboard overview.

    The current balance comes from the user's accounts. Income, expenses and
    the category breakdown cover the month of the newest transaction.
    """
    if transactions is None:
        transactions = transaction_service.list_transactions()

    newest_first = sorted(transactions, key=lambda txn: txn["date"], reverse=True)
    if newest_first:
        latest = newest_first[0]["date"]
        month = f"{latest.year:04d}-{latest.month:02d}"
        this_month = [
            txn for txn in newest_first
            if (txn["date"].year, txn["date"].month) == (latest.year, latest.month)
        ]
    else:
        month = ""
        this_month = []

    income = sum((txn["amount"] for txn in this_month if txn["amount"] > 0), ZERO)
    expenses = sum((-txn["amount"] for txn in this_month if txn["amount"] < 0), ZERO)

    return DashboardOverview(
        current_balance=summary.total_balance,
        month=month,
        monthly_income=income,
        monthly_expenses=expenses,
        spending_by_category=spending_by_category(this_month),
        recent_transactions=newest_first[:RECENT_TRANSACTION_LIMIT],
    )
