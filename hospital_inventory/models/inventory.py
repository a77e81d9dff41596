from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from hospital_inventory.database.base import Base


class InventoryRecord(Base):
    __tablename__ = "medical_inventory"

    id = Column(Integer, primary_key=True)

    department_id = Column(Integer, ForeignKey("departments.id"), nullable=False)
    hospital_id = Column(Integer, ForeignKey("hospitals.id", ondelete="CASCADE"), nullable=False)
    item_id = Column(Integer, ForeignKey("items.item_id"), nullable=False)

    batch_number = Column(String, nullable=False)
    expiry_date = Column(Date, nullable=False)
    quantity = Column(Integer, nullable=False)

    hospital = relationship("Hospital", back_populates="inventory")
    department = relationship("Department")
    item = relationship("Item")

    __table_args__ = (
        Index("idx_inventory_hospital", "hospital_id"),
        Index("idx_inventory_hospital_department", "hospital_id", "department_id"),
    )


__all__ = ["InventoryRecord"]
