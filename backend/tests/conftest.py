import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the app's database and logs out of the user's home directory
_tmp_dir = tempfile.mkdtemp(prefix="employee_service_tests_")
os.environ.setdefault("EMPLOYEE_SERVICE_DATA_DIR", _tmp_dir)
os.environ.setdefault("EMPLOYEE_SERVICE_LOG_DIR", str(Path(_tmp_dir) / "logs"))
os.environ.pop("EMPLOYEE_SERVICE_BASE_URL", None)

# Now import after path is set
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from models import Base
from database import get_db


@pytest.fixture
def db_engine():
    """In-memory database shared across threads for the lifetime of a test"""
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    """TestClient whose requests all use the test session"""
    from fastapi.testclient import TestClient
    from main import app

    app.dependency_overrides[get_db] = lambda: db_session
    yield TestClient(app)
    app.dependency_overrides.clear()
