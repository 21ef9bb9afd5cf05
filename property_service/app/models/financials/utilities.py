from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Utility(Base):
    __tablename__ = "utilities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(Integer, ForeignKey(
        "properties.id"), nullable=False, index=True)
    utility_type_id = Column(Integer, ForeignKey(
        "utility_types.id"), nullable=False)
    payment_type_id = Column(Integer, ForeignKey(
        "payment_types.id"), nullable=False)
    payment_category_id = Column(Integer, ForeignKey(
        "payment_categories.id"), nullable=False)
    reading_date = Column(Date, nullable=True)
    meter_reading = Column(Numeric(12, 2), nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    payment_date = Column(Date, nullable=False)
    check_number = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    property = relationship("Property")
    utility_type = relationship("UtilityType")
