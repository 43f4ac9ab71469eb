"""API tests for transactions."""

from decimal import Decimal

import pytest

API = "/app/v1"


class TestTransactions:

    @pytest.fixture(autouse=True)
    def setup(self, client, auth_headers):
        self.client = client
        self.headers = auth_headers

    def get(self, **params) -> dict:
        response = self.client.get(f"{API}/transactions", headers=self.headers, params=params)
        assert response.status_code == 200
        return response.json()

    def test_list_all(self):
        data = self.get()

        assert data["total"] == 12
        assert data["items"][0]["name"] == "Grocery Store"
        assert Decimal(data["items"][0]["amount"]) == Decimal("-82.45")
        assert data["items"][0]["date"] == "2023-08-15"

    def test_all_categories_means_no_filter(self):
        assert self.get(category="All Categories", account="All Accounts")["total"] == 12

    def test_filter_by_category(self):
        data = self.get(category="Income")

        assert [t["name"] for t in data["items"]] == ["Salary Deposit", "Freelance Work"]

    def test_filter_by_account(self):
        assert self.get(account="Credit Card")["total"] == 6

    def test_search_is_case_insensitive(self):
        data = self.get(search="BILL")

        assert [t["name"] for t in data["items"]] == ["Electricity Bill", "Phone Bill"]

    def test_combined_filters(self):
        data = self.get(category="Utilities", account="Main Account")

        assert [t["name"] for t in data["items"]] == ["Electricity Bill"]

    def test_categories(self):
        response = self.client.get(f"{API}/transactions/categories", headers=self.headers)

        assert response.status_code == 200
        assert response.json() == [
            "Groceries",
            "Income",
            "Entertainment",
            "Dining",
            "Shopping",
            "Transport",
            "Utilities",
            "Health & Fitness",
        ]

    def test_accounts(self):
        response = self.client.get(f"{API}/transactions/accounts", headers=self.headers)

        assert response.json() == ["Main Account", "Credit Card"]
