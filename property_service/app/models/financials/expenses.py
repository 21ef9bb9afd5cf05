from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(Integer, ForeignKey(
        "properties.id"), nullable=False, index=True)
    payment_type_id = Column(Integer, ForeignKey(
        "payment_types.id"), nullable=False)
    payment_category_id = Column(Integer, ForeignKey(
        "payment_categories.id"), nullable=False)
    expense_date = Column(Date, nullable=False)
    expense_amount = Column(Numeric(12, 2), nullable=False)
    check_number = Column(Integer, nullable=True)
    notes = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    property = relationship("Property")
    payment_type = relationship("PaymentType")
    payment_category = relationship("PaymentCategory")
