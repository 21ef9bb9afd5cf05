from sqlalchemy import Column, Date, ForeignKey, Index, Integer, Numeric, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class LeasePayment(Base):
    __tablename__ = "lease_payments"
    __table_args__ = (
        Index("ix_lease_payments_lease_date", "lease_id", "payment_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    lease_id = Column(String(64), ForeignKey(
        "leases.lease_id"), nullable=False)
    payment_type_id = Column(Integer, ForeignKey(
        "payment_types.id"), nullable=False)
    payment_category_id = Column(Integer, ForeignKey(
        "payment_categories.id"), nullable=False)

    payment_date = Column(Date, nullable=False)
    payment_amount = Column(Numeric(12, 2), nullable=False)
    payment_due_date = Column(Date, nullable=True)
    notes = Column(String(500), nullable=True)

    # derived by the ledger, never written by clients
    monthly_rent = Column(Numeric(12, 2), nullable=True)
    total_paid = Column(Numeric(14, 2), nullable=False, default=0)
    balance = Column(Numeric(14, 2), nullable=True)

    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    lease = relationship("Lease", back_populates="payments")
    payment_type = relationship("PaymentType")
    payment_category = relationship("PaymentCategory")
