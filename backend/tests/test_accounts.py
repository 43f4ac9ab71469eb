"""Tests for account records and the account book."""

import random
from datetime import date
from decimal import Decimal

import pytest

from finance_tracker.exceptions import AccountNotFoundError
from finance_tracker.schemas.link import LinkMetadata
from finance_tracker.services.accounts import (
    AccountBook,
    build_linked_account,
    demo_accounts,
    mask_account_number,
    new_account_id,
)


def test_account_ids_are_unique_within_a_millisecond():
    ids = [new_account_id() for _ in range(500)]

    assert len(set(ids)) == len(ids)
    assert all(i.startswith("acc_") for i in ids)


def test_mask_uses_four_digit_suffix():
    rng = random.Random(7)

    for _ in range(50):
        masked = mask_account_number(rng)
        assert masked.startswith("****")
        assert 1000 <= int(masked[4:]) <= 9999


def test_build_linked_account_uses_institution_name():
    metadata = LinkMetadata.model_validate({"institution": {"name": "Acme Bank"}})

    record = build_linked_account(metadata, today=date(2024, 3, 1))

    assert record.institution == "Acme Bank"
    assert record.name == "Acme Bank Account"
    assert record.last_updated == date(2024, 3, 1)
    assert record.balance == Decimal("1000.00")


def test_metadata_ignores_unknown_fields():
    metadata = LinkMetadata.model_validate({
        "institution": {"name": "Acme Bank", "logo": "..."},
        "accounts": [{"id": "a1", "verification_status": None}],
        "transfer_status": "complete",
    })

    assert metadata.institution_name == "Acme Bank"
    assert metadata.accounts[0].id == "a1"
    assert metadata.accounts[0].mask is None


class TestAccountBook:

    @pytest.fixture
    def book(self):
        return AccountBook(demo_accounts())

    def test_summary(self, book):
        summary = book.summary()

        assert summary.total_balance == Decimal("17033.03")
        assert summary.deposit_account_count == 2
        assert summary.credit_debt == Decimal("1245.63")
        assert summary.credit_account_count == 1
        assert summary.institution_count == 3

    def test_empty_summary(self):
        summary = AccountBook().summary()

        assert summary.total_balance == Decimal("0")
        assert summary.credit_debt == Decimal("0")
        assert summary.institution_count == 0

    def test_append_counts_institution_once(self, book):
        metadata = LinkMetadata.model_validate({"institution": {"name": "Chase"}})

        book.append(build_linked_account(metadata))

        assert len(book) == 4
        assert book.summary().institution_count == 3
        assert book.summary().total_balance == Decimal("18033.03")

    def test_disconnect(self, book):
        removed = book.disconnect("acc_5678")

        assert removed.name == "Bank of America Savings"
        assert [a.id for a in book.list_accounts()] == ["acc_1234", "acc_9012"]

        with pytest.raises(AccountNotFoundError):
            book.disconnect("acc_5678")

    def test_refresh(self, book):
        refreshed = book.refresh("acc_1234", today=date(2024, 1, 2))

        assert refreshed.last_updated == date(2024, 1, 2)
        assert book.get("acc_1234").last_updated == date(2024, 1, 2)

    def test_get_unknown(self, book):
        with pytest.raises(AccountNotFoundError):
            book.get("acc_missing")

    def test_list_returns_copy(self, book):
        accounts = book.list_accounts()
        accounts.clear()

        assert len(book) == 3
