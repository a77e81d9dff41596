from datetime import date, timedelta

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from hospital_inventory.core.session import SessionIdentity
from hospital_inventory.database.engine import build_engine, create_tables
from hospital_inventory.models import Department, Hospital, InventoryRecord, Item

MAIN_HOSPITAL = "St. Mary General"
OTHER_HOSPITAL = "Riverside Clinic"


def make_memory_db():
    engine = build_engine("sqlite:///:memory:")
    create_tables(engine)
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    return engine, Session


def seed_hospitals(Session):
    """Two hospitals; only the first owns Pharmacy and Emergency."""
    with Session() as db:
        main = Hospital(hospital_name=MAIN_HOSPITAL)
        other = Hospital(hospital_name=OTHER_HOSPITAL)
        db.add_all([main, other])
        db.flush()
        db.add_all(
            [
                Department(department="Pharmacy", hospital_id=main.id),
                Department(department="Emergency", hospital_id=main.id),
                Department(department="Radiology", hospital_id=other.id),
            ]
        )
        db.commit()
        return (
            SessionIdentity(hospital_id=main.id, hospital_name=main.hospital_name),
            SessionIdentity(hospital_id=other.id, hospital_name=other.hospital_name),
        )


def add_record(Session, identity, department, *, item_name="Gauze", quantity=10, days=90):
    with Session() as db:
        dept = db.execute(
            select(Department).where(
                Department.hospital_id == identity.hospital_id,
                Department.department == department,
            )
        ).scalar_one()
        item = Item(
            item_name=item_name,
            supplier=f"{item_name} Supplier",
            unit_price=1.5,
            category="Consumables",
        )
        db.add(item)
        db.flush()
        record = InventoryRecord(
            hospital_id=identity.hospital_id,
            department_id=dept.id,
            item_id=item.item_id,
            batch_number=f"{item_name[:3].upper()}-001",
            expiry_date=date.today() + timedelta(days=days),
            quantity=quantity,
        )
        db.add(record)
        db.commit()
        return record.id


def line(**overrides):
    payload = {
        "department": "Pharmacy",
        "item_name": "Amoxicillin 500mg",
        "batch_number": "AMX-2291",
        "expiry_date": (date.today() + timedelta(days=120)).isoformat(),
        "quantity": 40,
        "unit_price": 0.45,
        "supplier": "MedSupply Co",
        "category": "Antibiotics",
    }
    payload.update(overrides)
    return payload
