from sqlalchemy import Column, Float, Integer, String, Text, UniqueConstraint

from hospital_inventory.database.base import Base


class Item(Base):
    """Catalog entry shared by every hospital; keyed by name and supplier."""

    __tablename__ = "items"

    item_id = Column(Integer, primary_key=True)
    item_name = Column(String, nullable=False)
    supplier = Column(String, nullable=False)

    unit_price = Column(Float, nullable=False)
    category = Column(String, nullable=False)
    description = Column(Text)

    __table_args__ = (
        UniqueConstraint("item_name", "supplier", name="uq_items_name_supplier"),
    )


__all__ = ["Item"]
