from database import engine, Base, SessionLocal
from models import Employee
from config.app_config import SEED_DEMO_DATA
import logging

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = [
    ("Bilbo Baggins", "burglar", "bilbo@example.com"),
    ("Frodo Baggins", "thief", "frodo@example.com"),
]


def seed_demo_employees(db) -> int:
    """
    Insert the demo employees when the table is empty.

    Returns:
        Number of rows inserted
    """
    if db.query(Employee).count() > 0:
        return 0

    for name, role, email in DEMO_EMPLOYEES:
        db.add(Employee(name=name, role=role, email=email))
    db.commit()
    logger.info(f"Seeded {len(DEMO_EMPLOYEES)} demo employees")
    return len(DEMO_EMPLOYEES)


def init_database(bind=None, seed: bool = SEED_DEMO_DATA):
    """Create all tables and optionally insert demo employees"""
    bind = bind if bind is not None else engine
    Base.metadata.create_all(bind=bind)

    if not seed:
        return

    db = SessionLocal(bind=bind)
    try:
        seed_demo_employees(db)
    finally:
        db.close()


if __name__ == "__main__":
    init_database()
