from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from hospital_inventory.database.base import Base


class Department(Base):
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True)
    department = Column(String, nullable=False)
    hospital_id = Column(Integer, ForeignKey("hospitals.id", ondelete="CASCADE"), nullable=False)

    hospital = relationship("Hospital", back_populates="departments")

    __table_args__ = (
        UniqueConstraint("hospital_id", "department", name="uq_departments_hospital_name"),
    )


__all__ = ["Department"]
