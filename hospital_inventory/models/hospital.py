from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from hospital_inventory.database.base import Base


class Hospital(Base):
    __tablename__ = "hospitals"

    id = Column(Integer, primary_key=True)
    hospital_name = Column(String, nullable=False, unique=True)

    departments = relationship("Department", back_populates="hospital", cascade="all, delete-orphan")
    inventory = relationship("InventoryRecord", back_populates="hospital", cascade="all, delete-orphan")


__all__ = ["Hospital"]
