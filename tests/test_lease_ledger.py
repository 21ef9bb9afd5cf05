"""
Tests for the lease payment ledger recalculator.

The recalculator is exercised against in-memory collaborators so the
arithmetic and ordering rules can be checked without a database.
"""

import logging
from datetime import date
from decimal import Decimal

import pytest

from shared.core.errors import NotFoundError
from property_service.app.crud.leasing_tenants.lease_ledger import (
    LeaseTerms,
    LedgerRecalculator,
    expected_total_rent,
    months_elapsed,
    standing_for,
)
from property_service.app.crud.leasing_tenants.ledger_locks import KeyedLock
from property_service.app.enum.leasing_tenants_enum import LedgerStanding

LEDGER_LOGGER = "property_service.app.crud.leasing_tenants.lease_ledger"


class FakeLeaseDirectory:
    def __init__(self, *terms):
        self.terms = {t.lease_id: t for t in terms}

    def lookup(self, lease_id):
        return self.terms.get(lease_id)


class FakePaymentStore:
    def __init__(self):
        self.records = []
        self.persist_calls = 0
        self.update_calls = 0
        self.rollbacks = 0
        self._next_id = 1

    def list_by_lease(self, lease_id):
        rows = [r for r in self.records if r.lease_id == lease_id]
        return sorted(rows, key=lambda r: (r.payment_date, r.id))

    def persist(self, record):
        self.persist_calls += 1
        record.id = self._next_id
        self._next_id += 1
        self.records.append(record)
        return record

    def update(self, record):
        self.update_calls += 1
        return record

    def rollback(self):
        self.rollbacks += 1

    def remove(self, record_id):
        self.records = [r for r in self.records if r.id != record_id]


class BrokenPaymentStore(FakePaymentStore):
    def update(self, record):
        raise RuntimeError("connection lost")


class Clock:
    def __init__(self, today):
        self.today = today

    def __call__(self):
        return self.today


LEASE = LeaseTerms(lease_id="L-1", monthly_rent=Decimal("1000"), start_date=date(2024, 1, 1))


@pytest.fixture
def clock():
    return Clock(date(2024, 3, 15))


@pytest.fixture
def store():
    return FakePaymentStore()


@pytest.fixture
def ledger(store, clock):
    return LedgerRecalculator(FakeLeaseDirectory(LEASE), store, today=clock, locks=KeyedLock())


class TestMonthArithmetic:
    """Accrued rent counts whole calendar months from the lease start."""

    def test_months_between_calendar_months(self):
        assert months_elapsed(date(2024, 1, 1), date(2024, 3, 15)) == 2

    def test_days_are_ignored(self):
        assert months_elapsed(date(2024, 1, 31), date(2024, 2, 1)) == 1

    def test_same_month_counts_as_one(self):
        assert months_elapsed(date(2024, 3, 1), date(2024, 3, 31)) == 1

    def test_start_in_the_future_is_clamped_to_one(self):
        assert months_elapsed(date(2025, 6, 1), date(2024, 3, 15)) == 1

    def test_crosses_year_boundary(self):
        assert months_elapsed(date(2023, 11, 20), date(2024, 2, 3)) == 3

    def test_expected_total_rent(self):
        assert expected_total_rent(Decimal("1250.50"), date(2024, 1, 1),
                                   date(2024, 5, 1)) == Decimal("5002.00")

    def test_standing(self):
        assert standing_for(Decimal("10")) == LedgerStanding.arrears
        assert standing_for(Decimal("-10")) == LedgerStanding.credit
        assert standing_for(Decimal("0")) == LedgerStanding.settled


class TestRecordPayment:

    def test_first_payment_balance(self, ledger):
        record = ledger.record_payment("L-1", date(2024, 3, 15), Decimal("500"))

        assert months_elapsed(LEASE.start_date, date(2024, 3, 15)) == 2
        assert expected_total_rent(LEASE.monthly_rent, LEASE.start_date, date(2024, 3, 15)) == Decimal("2000")
        assert record.id == 1
        assert record.monthly_rent == Decimal("1000")
        assert record.total_paid == Decimal("500")
        assert record.balance == Decimal("1500")

    def test_total_paid_accumulates(self, ledger):
        ledger.record_payment("L-1", date(2024, 1, 5), Decimal("500"))
        second = ledger.record_payment("L-1", date(2024, 2, 5), Decimal("700"))

        assert second.total_paid == Decimal("1200")
        assert second.balance == Decimal("800")

    def test_payments_in_date_order_never_decrease_total_paid(self, ledger):
        amounts = ["300", "0", "1000", "250.25"]
        totals = []
        for month, amount in enumerate(amounts, start=1):
            record = ledger.record_payment("L-1", date(2024, month, 1), Decimal(amount))
            totals.append(record.total_paid)

        assert totals == sorted(totals)
        assert totals[-1] == Decimal("1550.25")

    def test_extra_fields_are_stored(self, ledger):
        record = ledger.record_payment(
            "L-1", date(2024, 2, 1), 500,
            payment_type_id=3, payment_category_id=4, notes="February")

        assert record.payment_type_id == 3
        assert record.payment_category_id == 4
        assert record.notes == "February"
        assert record.payment_amount == Decimal("500")

    def test_unknown_lease_raises_and_persists_nothing(self, ledger, store):
        with pytest.raises(NotFoundError, match="L-404"):
            ledger.record_payment("L-404", date(2024, 2, 1), Decimal("500"))

        assert store.persist_calls == 0
        assert store.records == []

    def test_overpayment_gives_negative_balance(self, ledger):
        record = ledger.record_payment("L-1", date(2024, 2, 1), Decimal("2500"))
        assert record.balance == Decimal("-500")

    def test_logs_recorded_payment(self, ledger, caplog):
        with caplog.at_level(logging.INFO, logger=LEDGER_LOGGER):
            ledger.record_payment("L-1", date(2024, 2, 1), Decimal("500"))

        assert "Recorded payment 1 on lease L-1" in caplog.text


class TestPaymentDeleted:

    def test_deleting_only_payment_writes_nothing(self, ledger, store):
        record = ledger.record_payment("L-1", date(2024, 2, 1), Decimal("500"))
        store.remove(record.id)

        ledger.on_payment_deleted("L-1")

        assert store.records == []
        assert store.update_calls == 0

    def test_survivors_are_recomputed_from_scratch(self, ledger, store, clock):
        first = ledger.record_payment("L-1", date(2024, 1, 5), Decimal("400"))
        middle = ledger.record_payment("L-1", date(2024, 2, 5), Decimal("300"))
        last = ledger.record_payment("L-1", date(2024, 3, 5), Decimal("200"))

        # recomputation measures accrued rent against the current date
        clock.today = date(2024, 5, 20)
        store.remove(middle.id)
        ledger.on_payment_deleted("L-1")

        assert [r.id for r in store.list_by_lease("L-1")] == [first.id, last.id]
        assert first.total_paid == Decimal("400")
        assert first.balance == Decimal("3600")
        assert last.total_paid == Decimal("600")
        assert last.balance == Decimal("3400")

    def test_recompute_is_idempotent(self, ledger, store):
        ledger.record_payment("L-1", date(2024, 1, 5), Decimal("400"))
        doomed = ledger.record_payment("L-1", date(2024, 2, 5), Decimal("300"))
        ledger.record_payment("L-1", date(2024, 3, 5), Decimal("200"))
        store.remove(doomed.id)

        ledger.on_payment_deleted("L-1")
        first_pass = [(r.id, r.total_paid, r.balance) for r in store.list_by_lease("L-1")]
        ledger.on_payment_deleted("L-1")
        second_pass = [(r.id, r.total_paid, r.balance) for r in store.list_by_lease("L-1")]

        assert first_pass == second_pass

    def test_same_day_payments_keep_insertion_order(self, ledger, store):
        a = ledger.record_payment("L-1", date(2024, 2, 1), Decimal("100"))
        b = ledger.record_payment("L-1", date(2024, 2, 1), Decimal("50"))
        c = ledger.record_payment("L-1", date(2024, 2, 1), Decimal("25"))
        store.remove(a.id)

        ledger.on_payment_deleted("L-1")

        assert b.total_paid == Decimal("50")
        assert c.total_paid == Decimal("75")

    def test_out_of_order_insert_is_resequenced(self, ledger, store):
        late = ledger.record_payment("L-1", date(2024, 3, 1), Decimal("100"))
        early = ledger.record_payment("L-1", date(2024, 1, 1), Decimal("300"))
        assert early.total_paid == Decimal("400")

        ledger.recalculate("L-1")

        assert early.total_paid == Decimal("300")
        assert late.total_paid == Decimal("400")

    def test_missing_lease_is_logged_not_raised(self, store, clock, caplog):
        ledger = LedgerRecalculator(FakeLeaseDirectory(), store, today=clock, locks=KeyedLock())

        with caplog.at_level(logging.WARNING, logger=LEDGER_LOGGER):
            ledger.on_payment_deleted("L-gone")

        assert "Lease L-gone not found during post-delete recalculation" in caplog.text
        assert store.update_calls == 0

    def test_store_failure_is_rolled_back_and_logged(self, clock, caplog):
        store = BrokenPaymentStore()
        ledger = LedgerRecalculator(FakeLeaseDirectory(LEASE), store, today=clock, locks=KeyedLock())
        ledger.record_payment("L-1", date(2024, 2, 1), Decimal("500"))

        with caplog.at_level(logging.ERROR, logger=LEDGER_LOGGER):
            ledger.on_payment_deleted("L-1")

        assert store.rollbacks == 1
        assert "Error recalculating lease payments for lease L-1" in caplog.text

    def test_recalculate_unknown_lease_raises(self, ledger):
        with pytest.raises(NotFoundError):
            ledger.recalculate("L-404")


class TestSummary:

    def test_summary_totals(self, ledger):
        ledger.record_payment("L-1", date(2024, 1, 5), Decimal("1000"))
        ledger.record_payment("L-1", date(2024, 2, 5), Decimal("400"))

        summary = ledger.summarize("L-1")

        assert summary.as_of == date(2024, 3, 15)
        assert summary.months_elapsed == 2
        assert summary.expected_total_rent == Decimal("2000")
        assert summary.total_paid == Decimal("1400")
        assert summary.balance == Decimal("600")
        assert summary.standing == LedgerStanding.arrears
        assert len(summary.payments) == 2

    def test_summary_without_payments(self, ledger):
        summary = ledger.summarize("L-1")

        assert summary.total_paid == Decimal("0")
        assert summary.balance == Decimal("2000")
        assert summary.payments == []

    def test_summary_unknown_lease(self, ledger):
        with pytest.raises(NotFoundError):
            ledger.summarize("nope")
