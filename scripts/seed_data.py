import argparse
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running this script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from datetime import date, timedelta

from sqlalchemy import delete, select

from hospital_inventory.core.logging import setup_logging
from hospital_inventory.database import create_tables, new_session
from hospital_inventory.models import Department, Hospital, InventoryRecord, Item


def parse_args():
    parser = argparse.ArgumentParser(description="Seed a sample hospital with inventory.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    parser.add_argument(
        "--hospital",
        default="St. Mary General",
        help="Name of the hospital to create.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    create_tables()

    db = new_session()
    try:
        if args.reset:
            db.execute(delete(InventoryRecord))
            db.execute(delete(Item))
            db.execute(delete(Department))
            db.execute(delete(Hospital))
            db.commit()

        has_hospital = db.execute(select(Hospital.id).limit(1)).first()
        if has_hospital:
            print("Seed skipped: hospitals already exist.")
            return

        hospital = Hospital(hospital_name=args.hospital)
        db.add(hospital)
        db.flush()

        pharmacy = Department(department="Pharmacy", hospital_id=hospital.id)
        emergency = Department(department="Emergency", hospital_id=hospital.id)
        db.add_all([pharmacy, emergency])

        items = [
            Item(
                item_name="Amoxicillin 500mg",
                supplier="MedSupply Co",
                unit_price=0.45,
                category="Antibiotics",
                description="Capsules, blister pack of 10",
            ),
            Item(
                item_name="Saline 0.9% 1L",
                supplier="FluidCare",
                unit_price=2.10,
                category="IV Fluids",
            ),
            Item(
                item_name="Nitrile Gloves M",
                supplier="SafeHands",
                unit_price=0.08,
                category="Consumables",
            ),
        ]
        db.add_all(items)
        db.flush()

        today = date.today()
        records = [
            InventoryRecord(
                hospital_id=hospital.id,
                department_id=pharmacy.id,
                item_id=items[0].item_id,
                batch_number="AMX-2291",
                expiry_date=today + timedelta(days=12),
                quantity=15,
            ),
            InventoryRecord(
                hospital_id=hospital.id,
                department_id=emergency.id,
                item_id=items[1].item_id,
                batch_number="SAL-0412",
                expiry_date=today + timedelta(days=45),
                quantity=36,
            ),
            InventoryRecord(
                hospital_id=hospital.id,
                department_id=emergency.id,
                item_id=items[2].item_id,
                batch_number="GLV-7781",
                expiry_date=today + timedelta(days=400),
                quantity=240,
            ),
        ]
        db.add_all(records)
        db.commit()
        print(f"Seed data created for hospital {hospital.hospital_name} (id={hospital.id}).")
    finally:
        db.close()


if __name__ == "__main__":
    main()
