from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from shared.core.database import Base


class PaymentCategory(Base):
    __tablename__ = "payment_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    payment_category = Column(String(50), nullable=False, unique=True, index=True)
    description = Column(String(200), nullable=False, default="")
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
