from sqlalchemy import Boolean, Column, Integer, String, DateTime
from sqlalchemy.sql import func
from shared.core.database import Base


class Resident(Base):
    __tablename__ = "residents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), nullable=True, unique=True)
    mobile_number = Column(String(15), nullable=True)
    home_number = Column(String(15), nullable=True)
    notes = Column(String(500), nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"
