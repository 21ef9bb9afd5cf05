from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    address = Column(String(200), nullable=False, unique=True)
    city = Column(String(100), nullable=False, index=True)
    state = Column(String(2), nullable=False)  # two letter code, upper case
    zipcode = Column(Integer, nullable=True)
    unit_count = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # relationships
    units = relationship("Unit", back_populates="property")
    leases = relationship("Lease", back_populates="property")
