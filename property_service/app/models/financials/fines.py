from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Fine(Base):
    __tablename__ = "fines"

    id = Column(Integer, primary_key=True, autoincrement=True)
    fine_id = Column(String(64), nullable=False, unique=True, index=True)
    property_id = Column(Integer, ForeignKey(
        "properties.id"), nullable=False, index=True)
    fine_type_id = Column(Integer, ForeignKey(
        "fine_types.id"), nullable=False)
    payment_type_id = Column(Integer, ForeignKey(
        "payment_types.id"), nullable=False)
    payment_category_id = Column(Integer, ForeignKey(
        "payment_categories.id"), nullable=False)
    fine_date = Column(Date, nullable=False)
    fine_due_date = Column(Date, nullable=False)
    fine_amount = Column(Numeric(12, 2), nullable=False)
    check_number = Column(Integer, nullable=True)
    notes = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    property = relationship("Property")
    fine_type = relationship("FineType")
