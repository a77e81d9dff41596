from sqlalchemy.orm import Session, sessionmaker

from hospital_inventory.database.engine import get_engine

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


def new_session() -> Session:
    return SessionLocal(bind=get_engine())


def get_db():
    db = new_session()
    try:
        yield db
    finally:
        db.close()
