from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Inspection(Base):
    __tablename__ = "inspections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(Integer, ForeignKey(
        "properties.id"), nullable=False, index=True)
    inspection_type_id = Column(Integer, ForeignKey(
        "inspection_types.id"), nullable=False)
    payment_type_id = Column(Integer, ForeignKey(
        "payment_types.id"), nullable=False)
    inspection_date = Column(Date, nullable=False)
    inspected_by = Column(String(100), nullable=False)
    inspection_amount = Column(Numeric(12, 2), nullable=False)
    check_number = Column(Integer, nullable=True)
    notes = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    property = relationship("Property")
    inspection_type = relationship("InspectionType")
