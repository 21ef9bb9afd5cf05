from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from shared.core.database import Base


class InspectionType(Base):
    __tablename__ = "inspection_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    inspection_type = Column(String(100), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
