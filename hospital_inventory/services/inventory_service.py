import logging
from contextlib import contextmanager
from typing import Iterator, Sequence

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hospital_inventory.core.exceptions import (
    InventoryError,
    NotFound,
    PersistenceFailure,
    ValidationFailed,
    describe_validation_errors,
)
from hospital_inventory.core.session import SessionIdentity
from hospital_inventory.models.department import Department
from hospital_inventory.models.hospital import Hospital
from hospital_inventory.models.inventory import InventoryRecord
from hospital_inventory.models.item import Item
from hospital_inventory.schemas.inventory import InventoryLineIn, InventoryUpdate

logger = logging.getLogger(__name__)

CREATE_FAILED = "Unable to add inventory items."
LIST_FAILED = "Unable to retrieve inventory items."
UPDATE_FAILED = "Unable to update inventory item."
DELETE_FAILED = "Unable to delete inventory item."

ITEMS_REQUIRED = "Items array is required."
FIELDS_REQUIRED = "All fields are required for each item."
UPDATE_FIELDS_REQUIRED = (
    "Item ID and at least one field to update (quantity or expiry_date) are required."
)
ID_REQUIRED = "Inventory item ID is required."
NOT_FOUND_OR_DENIED = "Item not found or access denied."

_LINES = TypeAdapter(list[InventoryLineIn])


@contextmanager
def _transaction(db: Session, failure_message: str) -> Iterator[None]:
    """Commit on success; roll back and surface an opaque error otherwise."""
    try:
        yield
        db.commit()
    except InventoryError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(failure_message)
        raise PersistenceFailure(failure_message) from exc


def parse_lines(payload) -> list[InventoryLineIn]:
    if not isinstance(payload, list) or not payload:
        raise ValidationFailed(ITEMS_REQUIRED)
    try:
        return _LINES.validate_python(payload)
    except ValidationError as exc:
        raise ValidationFailed(describe_validation_errors(exc.errors())) from exc


def _find_hospital(db: Session, hospital_name: str) -> Hospital | None:
    return (
        db.execute(select(Hospital).where(Hospital.hospital_name == hospital_name))
        .scalars()
        .first()
    )


def _find_department(db: Session, name: str, hospital_id: int) -> Department | None:
    return (
        db.execute(
            select(Department).where(
                Department.department == name,
                Department.hospital_id == hospital_id,
            )
        )
        .scalars()
        .first()
    )


def _find_owned_record(db: Session, record_id: int, hospital_id: int) -> InventoryRecord | None:
    return (
        db.execute(
            select(InventoryRecord).where(
                InventoryRecord.id == record_id,
                InventoryRecord.hospital_id == hospital_id,
            )
        )
        .scalars()
        .first()
    )


def upsert_item(db: Session, line: InventoryLineIn) -> Item:
    item = (
        db.execute(
            select(Item).where(
                Item.item_name == line.item_name,
                Item.supplier == line.supplier,
            )
        )
        .scalars()
        .first()
    )
    if item:
        item.unit_price = line.unit_price
        item.category = line.category
        if line.description is not None:
            item.description = line.description
    else:
        item = Item(
            item_name=line.item_name,
            supplier=line.supplier,
            unit_price=line.unit_price,
            category=line.category,
            description=line.description,
        )
        db.add(item)
    # Later lines in the same request must see this row.
    db.flush()
    return item


def create_inventory_items(
    db: Session,
    identity: SessionIdentity,
    lines: Sequence[InventoryLineIn],
) -> int:
    if not lines:
        raise ValidationFailed(ITEMS_REQUIRED)

    with _transaction(db, CREATE_FAILED):
        hospital = _find_hospital(db, identity.hospital_name)
        if not hospital:
            raise NotFound("Hospital not found")

        rows = []
        for line in lines:
            missing = line.missing_fields()
            if missing:
                raise ValidationFailed(f"{FIELDS_REQUIRED} Missing: {', '.join(missing)}")

            department = _find_department(db, line.department, hospital.id)
            if not department:
                raise ValidationFailed(
                    f"Invalid department for hospital {identity.hospital_name}"
                )

            item = upsert_item(db, line)
            rows.append(
                {
                    "department_id": department.id,
                    "hospital_id": hospital.id,
                    "item_id": item.item_id,
                    "batch_number": line.batch_number,
                    "expiry_date": line.expiry_date,
                    "quantity": line.quantity,
                }
            )

        db.execute(insert(InventoryRecord), rows)

    logger.info(
        "Added %d inventory records for hospital %s",
        len(rows),
        hospital.id,
    )
    return len(rows)


def flatten_record(record: InventoryRecord, department_name: str, item: Item) -> dict:
    return {
        "id": record.id,
        "department_id": record.department_id,
        "hospital_id": record.hospital_id,
        "item_id": record.item_id,
        "item_name": item.item_name,
        "description": item.description,
        "batch_number": record.batch_number,
        "expiry_date": record.expiry_date,
        "quantity": record.quantity,
        "unit_price": item.unit_price,
        "supplier": item.supplier,
        "category": item.category,
        "department": department_name,
    }


def list_inventory(db: Session, identity: SessionIdentity) -> list[dict]:
    stmt = (
        select(InventoryRecord, Department.department, Item)
        .join(Department, Department.id == InventoryRecord.department_id)
        .join(Item, Item.item_id == InventoryRecord.item_id)
        .where(InventoryRecord.hospital_id == identity.hospital_id)
        .order_by(InventoryRecord.id)
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as exc:
        logger.exception(LIST_FAILED)
        raise PersistenceFailure(LIST_FAILED) from exc
    return [flatten_record(record, department_name, item) for record, department_name, item in rows]


def update_inventory_item(
    db: Session,
    identity: SessionIdentity,
    payload: InventoryUpdate,
) -> InventoryRecord:
    if not payload.id or not payload.has_changes():
        raise ValidationFailed(UPDATE_FIELDS_REQUIRED)

    with _transaction(db, UPDATE_FAILED):
        record = _find_owned_record(db, payload.id, identity.hospital_id)
        if not record:
            raise NotFound(NOT_FOUND_OR_DENIED)

        if payload.quantity is not None:
            record.quantity = payload.quantity
        if payload.expiry_date is not None:
            record.expiry_date = payload.expiry_date

    logger.info("Updated inventory record %s for hospital %s", record.id, identity.hospital_id)
    return record


def delete_inventory_item(db: Session, identity: SessionIdentity, record_id: int | None) -> None:
    if not record_id:
        raise ValidationFailed(ID_REQUIRED)

    with _transaction(db, DELETE_FAILED):
        record = _find_owned_record(db, record_id, identity.hospital_id)
        if not record:
            raise NotFound(NOT_FOUND_OR_DENIED)
        db.delete(record)

    logger.info("Deleted inventory record %s for hospital %s", record_id, identity.hospital_id)


__all__ = [
    "create_inventory_items",
    "delete_inventory_item",
    "flatten_record",
    "list_inventory",
    "parse_lines",
    "update_inventory_item",
    "upsert_item",
]
