"""View-models and renderers for the inventory table UI.

Row colouring comes from the tier ladders in ``core.tiers``; this module only
formats values and hands them to the Jinja2 component macros.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from hospital_inventory.core.constants import EXPIRATION_DISPLAY_FORMAT, TEMPLATES_DIR
from hospital_inventory.core.dates import as_utc_datetime
from hospital_inventory.core.tiers import (
    EXPIRY_BADGE_CLASSES,
    QUANTITY_BADGE_CLASSES,
    ExpiryTier,
    QuantityTier,
    expiry_tier,
    quantity_tier,
)

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_COMPONENTS = "components.html"


@dataclass(frozen=True)
class InventoryRowView:
    item: str
    department: str
    quantity: str
    batch_number: str
    unit_price: str
    expiration: str
    quantity_tier: QuantityTier
    expiry_tier: ExpiryTier
    record_id: int | None = None

    @property
    def quantity_classes(self) -> str:
        return " ".join(QUANTITY_BADGE_CLASSES[self.quantity_tier])

    @property
    def expiry_classes(self) -> str:
        return " ".join(EXPIRY_BADGE_CLASSES[self.expiry_tier])


def format_expiration(expiration) -> str:
    expiry_at = as_utc_datetime(expiration)
    if expiry_at is None:
        return "Invalid Date"
    return expiry_at.strftime(EXPIRATION_DISPLAY_FORMAT)


def build_row(
    item,
    department,
    quantity,
    batch_number,
    unit_price,
    expiration,
    *,
    record_id: int | None = None,
    now: datetime | None = None,
) -> InventoryRowView:
    return InventoryRowView(
        item=str(item),
        department=str(department),
        quantity=str(quantity),
        batch_number=str(batch_number),
        unit_price=str(unit_price),
        expiration=format_expiration(expiration),
        quantity_tier=quantity_tier(quantity),
        expiry_tier=expiry_tier(expiration, now),
        record_id=record_id,
    )


def row_from_record(record: dict, *, now: datetime | None = None) -> InventoryRowView:
    return build_row(
        record["item_name"],
        record["department"],
        record["quantity"],
        record["batch_number"],
        record["unit_price"],
        record["expiry_date"],
        record_id=record.get("id"),
        now=now,
    )


def _components():
    return templates.get_template(_COMPONENTS).module


def render_inventory_row(row: InventoryRowView) -> Markup:
    return Markup(_components().inventory_row(row))


def render_edit_dropdown(record_id: int | None) -> Markup:
    return Markup(_components().edit_dropdown(record_id))


def render_reveal(content: str, class_name: str | None = None) -> Markup:
    return Markup(_components().reveal(content, class_name))


def render_inventory_table(records: Iterable[dict], *, now: datetime | None = None) -> str:
    rows = [row_from_record(record, now=now) for record in records]
    return templates.get_template("inventory_table.html").render(rows=rows)


__all__ = [
    "InventoryRowView",
    "build_row",
    "format_expiration",
    "render_edit_dropdown",
    "render_inventory_row",
    "render_inventory_table",
    "render_reveal",
    "row_from_record",
    "templates",
]
