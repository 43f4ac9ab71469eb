"""API tests for the linked accounts dashboard."""

from datetime import date
from decimal import Decimal

import pytest

API = "/app/v1"


class TestAccounts:
    """Every new user starts with the three demo accounts."""

    @pytest.fixture(autouse=True)
    def setup(self, client, auth_headers):
        self.client = client
        self.headers = auth_headers

    def test_list_seeded_accounts(self):
        response = self.client.get(f"{API}/accounts", headers=self.headers)

        assert response.status_code == 200
        data = response.json()
        assert [a["name"] for a in data] == [
            "Chase Checking",
            "Bank of America Savings",
            "Discover Credit Card",
        ]
        assert data[2]["type"] == "credit"
        assert Decimal(data[2]["balance"]) == Decimal("-1245.63")

    def test_summary(self):
        response = self.client.get(f"{API}/accounts/summary", headers=self.headers)

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["total_balance"]) == Decimal("17033.03")
        assert data["deposit_account_count"] == 2
        assert Decimal(data["credit_debt"]) == Decimal("1245.63")
        assert data["credit_account_count"] == 1
        assert data["institution_count"] == 3

    def test_disconnect(self):
        response = self.client.delete(f"{API}/accounts/acc_9012", headers=self.headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Discover Credit Card disconnected"

        summary = self.client.get(f"{API}/accounts/summary", headers=self.headers).json()
        assert summary["credit_account_count"] == 0
        assert Decimal(summary["credit_debt"]) == Decimal("0")

        notifications = self.client.get(f"{API}/notifications", headers=self.headers).json()
        assert notifications[0]["title"] == "Discover Credit Card disconnected"

        again = self.client.delete(f"{API}/accounts/acc_9012", headers=self.headers)
        assert again.status_code == 404

    def test_refresh(self):
        response = self.client.post(f"{API}/accounts/acc_1234/refresh", headers=self.headers)

        assert response.status_code == 200
        assert response.json()["last_updated"] == date.today().isoformat()

    def test_refresh_unknown(self):
        response = self.client.post(f"{API}/accounts/acc_missing/refresh", headers=self.headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Account acc_missing not found"

    def test_accounts_are_per_user(self, client, test_user_password):
        self.client.delete(f"{API}/accounts/acc_1234", headers=self.headers)

        other = client.post(
            f"{API}/auth/signup",
            json={
                "email": "someone.else@example.com",
                "password": test_user_password,
                "first_name": "Other",
                "last_name": "User",
            },
        )
        if other.status_code == 409:
            other = client.post(
                f"{API}/auth/login",
                json={"email": "someone.else@example.com", "password": test_user_password},
            )
        other_headers = {"Authorization": f"Bearer {other.json()['access_token']}"}

        ids = [a["id"] for a in client.get(f"{API}/accounts", headers=other_headers).json()]
        assert "acc_1234" in ids


def test_accounts_require_auth(client):
    response = client.get(f"{API}/accounts")

    assert response.status_code in (401, 403)
