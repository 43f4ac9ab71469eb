"""Tests for the dashboard overview."""

from datetime import date
from decimal import Decimal

import pytest

from finance_tracker.schemas.account import AccountSummary
from finance_tracker.services.dashboard_service import build_overview, spending_by_category

API = "/app/v1"


def make_summary(total_balance: str = "0") -> AccountSummary:
    return AccountSummary(
        total_balance=Decimal(total_balance),
        deposit_account_count=0,
        credit_debt=Decimal("0"),
        credit_account_count=0,
        institution_count=0,
    )


def txn(name: str, amount: str, day: date, category: str) -> dict:
    return {
        "id": 1,
        "name": name,
        "amount": Decimal(amount),
        "date": day,
        "category": category,
        "account": "Main Account",
    }


class TestBuildOverview:

    def test_only_latest_month_is_totalled(self):
        transactions = [
            txn("Rent", "-900.00", date(2023, 7, 1), "Housing"),
            txn("Salary", "2000.00", date(2023, 8, 1), "Income"),
            txn("Groceries", "-60.00", date(2023, 8, 3), "Groceries"),
        ]

        overview = build_overview(make_summary("250.00"), transactions)

        assert overview.current_balance == Decimal("250.00")
        assert overview.month == "2023-08"
        assert overview.monthly_income == Decimal("2000.00")
        assert overview.monthly_expenses == Decimal("60.00")
        assert [s.category for s in overview.spending_by_category] == ["Groceries"]
        assert [t.name for t in overview.recent_transactions] == ["Groceries", "Salary", "Rent"]

    def test_no_transactions(self):
        overview = build_overview(make_summary(), [])

        assert overview.month == ""
        assert overview.monthly_income == Decimal("0")
        assert overview.monthly_expenses == Decimal("0")
        assert overview.spending_by_category == []
        assert overview.recent_transactions == []

    def test_spending_ignores_income(self):
        assert spending_by_category([txn("Salary", "100.00", date(2023, 8, 1), "Income")]) == []

    def test_spending_percentages_round_half_up(self):
        spending = spending_by_category([
            txn("A", "-1.00", date(2023, 8, 1), "One"),
            txn("B", "-1.00", date(2023, 8, 1), "Two"),
            txn("C", "-6.00", date(2023, 8, 1), "Three"),
        ])

        assert [(s.category, s.percentage) for s in spending] == [
            ("Three", 75),
            ("One", 13),
            ("Two", 13),
        ]


class TestDashboardApi:

    @pytest.fixture(autouse=True)
    def setup(self, client, auth_headers):
        self.client = client
        self.headers = auth_headers

    def get_overview(self) -> dict:
        response = self.client.get(f"{API}/dashboard/overview", headers=self.headers)
        assert response.status_code == 200
        return response.json()

    def test_overview(self):
        data = self.get_overview()

        assert Decimal(data["current_balance"]) == Decimal("17033.03")
        assert data["month"] == "2023-08"
        assert Decimal(data["monthly_income"]) == Decimal("3150.00")
        assert Decimal(data["monthly_expenses"]) == Decimal("523.61")
        assert [t["name"] for t in data["recent_transactions"]] == [
            "Grocery Store",
            "Salary Deposit",
            "Netflix Subscription",
            "Restaurant Payment",
            "Amazon Purchase",
        ]

    def test_spending_breakdown(self):
        spending = self.get_overview()["spending_by_category"]

        assert [(s["category"], Decimal(s["amount"]), s["percentage"]) for s in spending] == [
            ("Shopping", Decimal("162.73"), 31),
            ("Utilities", Decimal("140.20"), 27),
            ("Groceries", Decimal("82.45"), 16),
            ("Dining", Decimal("47.25"), 9),
            ("Transport", Decimal("45.00"), 9),
            ("Health & Fitness", Decimal("29.99"), 6),
            ("Entertainment", Decimal("15.99"), 3),
        ]

    def test_balance_follows_disconnects(self):
        accounts = self.client.get(f"{API}/accounts", headers=self.headers).json()
        savings = next(a for a in accounts if a["type"] == "savings")

        self.client.delete(f"{API}/accounts/{savings['id']}", headers=self.headers)

        assert Decimal(self.get_overview()["current_balance"]) == Decimal("4532.78")


def test_dashboard_requires_auth(client):
    response = client.get(f"{API}/dashboard/overview")

    assert response.status_code in (401, 403)
