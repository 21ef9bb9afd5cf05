"""Tests for the per-lease lock registry."""

import threading
import time
from datetime import date
from decimal import Decimal

import pytest

from property_service.app.crud.leasing_tenants.lease_ledger import LeaseTerms, LedgerRecalculator
from property_service.app.crud.leasing_tenants.ledger_locks import KeyedLock


class TestKeyedLock:

    def test_entry_is_dropped_after_release(self):
        locks = KeyedLock()
        with locks.hold("L-1"):
            assert len(locks) == 1
        assert len(locks) == 0

    def test_entry_is_dropped_when_body_raises(self):
        locks = KeyedLock()
        with pytest.raises(RuntimeError):
            with locks.hold("L-1"):
                raise RuntimeError("boom")
        assert len(locks) == 0

    def test_different_keys_do_not_block(self):
        locks = KeyedLock()
        entered = threading.Event()

        def other():
            with locks.hold("L-2"):
                entered.set()

        with locks.hold("L-1"):
            worker = threading.Thread(target=other)
            worker.start()
            assert entered.wait(timeout=2)
        worker.join(timeout=2)

    def test_same_key_is_serialized(self):
        locks = KeyedLock()
        active = []
        overlaps = []
        guard = threading.Lock()

        def critical_section():
            with locks.hold("L-1"):
                with guard:
                    active.append(1)
                    if len(active) > 1:
                        overlaps.append(len(active))
                time.sleep(0.01)
                with guard:
                    active.pop()

        workers = [threading.Thread(target=critical_section) for _ in range(8)]
        for w in workers:
            w.start()
        for w in workers:
            w.join(timeout=5)

        assert overlaps == []
        assert len(locks) == 0


class SlowPaymentStore:
    """Payment store that yields between read and write so races would show."""

    def __init__(self):
        self.records = []
        self.update_calls = 0
        self._next_id = 1

    def list_by_lease(self, lease_id):
        rows = [r for r in self.records if r.lease_id == lease_id]
        time.sleep(0.001)
        return sorted(rows, key=lambda r: (r.payment_date, r.id))

    def persist(self, record):
        time.sleep(0.001)
        record.id = self._next_id
        self._next_id += 1
        self.records.append(record)
        return record

    def update(self, record):
        self.update_calls += 1
        return record

    def rollback(self):
        pass


class OneLease:
    def lookup(self, lease_id):
        if lease_id != "L-1":
            return None
        return LeaseTerms(lease_id="L-1", monthly_rent=Decimal("1000"), start_date=date(2024, 1, 1))


def make_ledger(store, locks):
    return LedgerRecalculator(OneLease(), store, today=lambda: date(2024, 3, 15), locks=locks)


class TestLedgerSerialization:
    """Every ledger read-modify-write on a lease runs under that lease's lock."""

    def test_concurrent_payments_lose_no_updates(self):
        store = SlowPaymentStore()
        ledger = make_ledger(store, KeyedLock())

        workers = [
            threading.Thread(target=ledger.record_payment,
                             args=("L-1", date(2024, 2, 1), Decimal("10")))
            for _ in range(20)
        ]
        for w in workers:
            w.start()
        for w in workers:
            w.join(timeout=10)

        totals = sorted(r.total_paid for r in store.records)
        assert totals == [Decimal(10 * n) for n in range(1, 21)]

    def test_held_lock_blocks_post_delete_recompute(self):
        store = SlowPaymentStore()
        locks = KeyedLock()
        ledger = make_ledger(store, locks)
        ledger.record_payment("L-1", date(2024, 2, 1), Decimal("500"))

        with locks.hold("L-1"):
            worker = threading.Thread(target=ledger.on_payment_deleted, args=("L-1",))
            worker.start()
            worker.join(timeout=0.2)

            assert worker.is_alive()
            assert store.update_calls == 0

        worker.join(timeout=5)
        assert not worker.is_alive()
        assert store.update_calls == 1
