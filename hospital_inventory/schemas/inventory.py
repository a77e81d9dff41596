from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUIRED_LINE_FIELDS = (
    "department",
    "item_name",
    "batch_number",
    "expiry_date",
    "quantity",
    "unit_price",
    "supplier",
    "category",
)


class InventoryLineIn(BaseModel):
    """One line of a bulk create request.

    Fields are optional at the type level so that a missing value is reported
    through the endpoint's own "all fields are required" error rather than a
    generic schema error.
    """

    department: Optional[str] = None
    item_name: Optional[str] = None
    batch_number: Optional[str] = None
    expiry_date: Optional[date] = None
    quantity: Optional[int] = Field(None, ge=0)
    unit_price: Optional[float] = Field(None, ge=0)
    supplier: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    def missing_fields(self) -> list[str]:
        # Zero quantities and prices count as missing, same as blank strings.
        return [name for name in REQUIRED_LINE_FIELDS if not getattr(self, name)]


class InventoryUpdate(BaseModel):
    id: Optional[int] = None
    quantity: Optional[int] = Field(None, ge=0)
    expiry_date: Optional[date] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("expiry_date", mode="before")
    @classmethod
    def _blank_expiry_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def has_changes(self) -> bool:
        return self.quantity is not None or self.expiry_date is not None


class InventoryCreated(BaseModel):
    count: int


class InventoryRecordRead(BaseModel):
    id: int
    department_id: int
    hospital_id: int
    item_id: int
    batch_number: str
    expiry_date: date
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class InventoryItemRead(InventoryRecordRead):
    """A stock line flattened with its department name and catalog fields."""

    item_name: str
    description: Optional[str] = None
    unit_price: float
    supplier: str
    category: str
    department: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
