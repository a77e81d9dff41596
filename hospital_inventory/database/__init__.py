from hospital_inventory.database.base import Base
from hospital_inventory.database.engine import create_tables, dispose_engine, get_engine
from hospital_inventory.database.session import SessionLocal, get_db, new_session

__all__ = [
    "Base",
    "SessionLocal",
    "create_tables",
    "dispose_engine",
    "get_db",
    "get_engine",
    "new_session",
]
