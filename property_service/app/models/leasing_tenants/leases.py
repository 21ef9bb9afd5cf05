from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, Numeric, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Lease(Base):
    __tablename__ = "leases"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # business identifier, referenced by lease payments
    lease_id = Column(String(64), nullable=False, unique=True, index=True)
    property_id = Column(Integer, ForeignKey(
        "properties.id"), nullable=False, index=True)
    unit_id = Column(Integer, ForeignKey("units.id"), nullable=False)

    lease_date = Column(Date, nullable=False)
    lease_start_date = Column(Date, nullable=True)
    lease_end_date = Column(Date, nullable=True)
    lease_term = Column(Integer, nullable=True)  # months

    monthly_rent = Column(Numeric(12, 2), nullable=False)
    security_deposit = Column(Numeric(12, 2), nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # relationships
    property = relationship("Property", back_populates="leases")
    unit = relationship("Unit", back_populates="leases")
    payments = relationship(
        "LeasePayment", back_populates="lease",
        order_by="LeasePayment.payment_date")
