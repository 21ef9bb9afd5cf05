from sqlalchemy import Boolean, Column, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from shared.core.database import Base


class UtilityType(Base):
    __tablename__ = "utility_types"
    __table_args__ = (
        UniqueConstraint("utility_name", "utility_provider",
                         name="uq_utility_types_name_provider"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    utility_name = Column(String(100), nullable=False)
    utility_provider = Column(String(100), nullable=False)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
