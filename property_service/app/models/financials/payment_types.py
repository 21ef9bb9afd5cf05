from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from shared.core.database import Base


class PaymentType(Base):
    __tablename__ = "payment_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    payment_type = Column(String(50), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
