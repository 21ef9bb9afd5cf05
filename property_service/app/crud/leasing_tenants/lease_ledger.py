# app/crud/leasing_tenants/lease_ledger.py
"""Running totals of a lease's payments.

Every payment stores ``total_paid`` (cumulative amount paid on the lease up to
and including that payment, in payment-date order) and ``balance`` (rent
accrued from the lease start until today minus ``total_paid``). Accrued rent
is always measured against *today*, so balances of older payments move as
months pass; that is the "arrears as of today" view the office works with.
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional, Protocol

from sqlalchemy.orm import Session

from shared.core.errors import NotFoundError, RecalculationWarning
from .ledger_locks import KeyedLock, lease_locks
from ...enum.leasing_tenants_enum import LedgerStanding
from ...models.leasing_tenants.leases import Lease
from ...models.leasing_tenants.lease_payments import LeasePayment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaseTerms:
    lease_id: str
    monthly_rent: Decimal
    start_date: date


@dataclass
class LedgerSummary:
    lease_id: str
    monthly_rent: Decimal
    lease_start: date
    as_of: date
    months_elapsed: int
    expected_total_rent: Decimal
    total_paid: Decimal
    balance: Decimal
    standing: LedgerStanding
    payments: List[LeasePayment] = field(default_factory=list)


class LeaseDirectory(Protocol):
    def lookup(self, lease_id: str) -> Optional[LeaseTerms]:
        ...


class PaymentHistoryStore(Protocol):
    def list_by_lease(self, lease_id: str) -> List[LeasePayment]:
        """All payments of the lease, oldest payment date first, ties in insertion order."""
        ...

    def persist(self, record: LeasePayment) -> LeasePayment:
        ...

    def update(self, record: LeasePayment) -> LeasePayment:
        ...

    def rollback(self) -> None:
        ...


def to_money(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def months_elapsed(start: date, as_of: date) -> int:
    """Whole calendar months between two dates, never less than one.

    Only year and month take part: 2024-01-31 -> 2024-02-01 is one month.
    """
    months = (as_of.year - start.year) * 12 + (as_of.month - start.month)
    return max(1, months)


def expected_total_rent(monthly_rent, start: date, as_of: date) -> Decimal:
    return to_money(monthly_rent) * months_elapsed(start, as_of)


def standing_for(balance: Decimal) -> LedgerStanding:
    if balance > 0:
        return LedgerStanding.arrears
    if balance < 0:
        return LedgerStanding.credit
    return LedgerStanding.settled


class SqlLeaseDirectory:
    def __init__(self, db: Session):
        self.db = db

    def lookup(self, lease_id: str) -> Optional[LeaseTerms]:
        lease = self.db.query(Lease).filter(Lease.lease_id == lease_id).first()
        if not lease:
            return None

        start = lease.lease_start_date or lease.lease_date
        if start is None:
            # lease_date is NOT NULL, only rows written outside the API get here
            start = lease.created_at.date()
        return LeaseTerms(
            lease_id=lease.lease_id,
            monthly_rent=to_money(lease.monthly_rent),
            start_date=start,
        )


class SqlPaymentHistoryStore:
    def __init__(self, db: Session):
        self.db = db

    def list_by_lease(self, lease_id: str) -> List[LeasePayment]:
        return (
            self.db.query(LeasePayment)
            .filter(LeasePayment.lease_id == lease_id)
            .order_by(LeasePayment.payment_date.asc(), LeasePayment.id.asc())
            .all()
        )

    def persist(self, record: LeasePayment) -> LeasePayment:
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def update(self, record: LeasePayment) -> LeasePayment:
        self.db.add(record)
        self.db.commit()
        return record

    def rollback(self) -> None:
        self.db.rollback()


class LedgerRecalculator:
    def __init__(
        self,
        leases: LeaseDirectory,
        payments: PaymentHistoryStore,
        today: Callable[[], date] = date.today,
        locks: KeyedLock = lease_locks,
    ):
        self.leases = leases
        self.payments = payments
        self.today = today
        self.locks = locks

    def record_payment(self, lease_id: str, payment_date: date, payment_amount, **fields) -> LeasePayment:
        """Create a payment with its running totals filled in.

        Raises NotFoundError before anything is written when the lease is unknown.
        """
        amount = to_money(payment_amount)
        with self.locks.hold(lease_id):
            terms = self._require_lease(lease_id)
            expected = expected_total_rent(
                terms.monthly_rent, terms.start_date, self.today())

            total_paid_so_far = sum(
                (to_money(p.payment_amount) for p in self.payments.list_by_lease(lease_id)),
                Decimal("0"),
            )
            total_paid = total_paid_so_far + amount

            record = LeasePayment(
                lease_id=lease_id,
                payment_date=payment_date,
                payment_amount=amount,
                monthly_rent=terms.monthly_rent,
                total_paid=total_paid,
                balance=expected - total_paid,
                **fields,
            )
            record = self.payments.persist(record)

        logger.info("Recorded payment %s on lease %s: amount=%s total_paid=%s balance=%s",
                    record.id, lease_id, amount, record.total_paid, record.balance)
        return record

    def recalculate(self, lease_id: str) -> List[LeasePayment]:
        """Rewrite the running totals of every payment on the lease."""
        with self.locks.hold(lease_id):
            terms = self._require_lease(lease_id)
            return self._rewrite(terms)

    def on_payment_deleted(self, lease_id: str) -> None:
        """Rebuild the ledger after one of its payments was removed.

        The delete has already been committed, so nothing raised here may reach
        the caller: a missing lease is logged as a warning, anything else is
        rolled back and logged.
        """
        with self.locks.hold(lease_id):
            try:
                terms = self.leases.lookup(lease_id)
                if terms is None:
                    raise RecalculationWarning(
                        f"Lease {lease_id} not found during post-delete recalculation")
                self._rewrite(terms)
            except RecalculationWarning as warning:
                logger.warning("%s", warning)
            except Exception:
                self.payments.rollback()
                logger.exception(
                    "Error recalculating lease payments for lease %s after deletion", lease_id)

    def summarize(self, lease_id: str) -> LedgerSummary:
        terms = self._require_lease(lease_id)
        as_of = self.today()
        payments = self.payments.list_by_lease(lease_id)
        total_paid = sum((to_money(p.payment_amount) for p in payments), Decimal("0"))
        expected = expected_total_rent(terms.monthly_rent, terms.start_date, as_of)
        balance = expected - total_paid

        return LedgerSummary(
            lease_id=lease_id,
            monthly_rent=terms.monthly_rent,
            lease_start=terms.start_date,
            as_of=as_of,
            months_elapsed=months_elapsed(terms.start_date, as_of),
            expected_total_rent=expected,
            total_paid=total_paid,
            balance=balance,
            standing=standing_for(balance),
            payments=payments,
        )

    def _require_lease(self, lease_id: str) -> LeaseTerms:
        terms = self.leases.lookup(lease_id)
        if terms is None:
            raise NotFoundError(f"Lease with ID {lease_id} not found")
        return terms

    def _rewrite(self, terms: LeaseTerms) -> List[LeasePayment]:
        remaining = self.payments.list_by_lease(terms.lease_id)
        if not remaining:
            return []

        expected = expected_total_rent(
            terms.monthly_rent, terms.start_date, self.today())

        running_total = Decimal("0")
        for payment in remaining:
            running_total += to_money(payment.payment_amount)
            payment.total_paid = running_total
            payment.monthly_rent = terms.monthly_rent
            payment.balance = expected - running_total
            self.payments.update(payment)

        logger.debug("Rewrote %d payments on lease %s (expected=%s total_paid=%s)",
                     len(remaining), terms.lease_id, expected, running_total)
        return remaining


def get_ledger(db: Session, today: Callable[[], date] = date.today) -> LedgerRecalculator:
    return LedgerRecalculator(
        SqlLeaseDirectory(db), SqlPaymentHistoryStore(db), today=today)
