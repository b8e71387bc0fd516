"""
Runtime Configuration for the Employee Service

Values are read from environment variables once at import time.

Includes:
- Data directory and database URL
- Log directory and level
- Public base URL used when building hypermedia links
- Demo data seeding toggle
- Server bind address
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str = 'false') -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


DATA_DIR = Path(os.environ.get(
    'EMPLOYEE_SERVICE_DATA_DIR',
    str(Path.home() / ".employee_service")
))

DATABASE_URL = os.environ.get(
    'EMPLOYEE_SERVICE_DATABASE_URL',
    f"sqlite:///{DATA_DIR / 'employees.db'}"
)

LOG_DIR = Path(os.environ.get('EMPLOYEE_SERVICE_LOG_DIR', str(DATA_DIR / "logs")))
LOG_LEVEL = os.environ.get('EMPLOYEE_SERVICE_LOG_LEVEL', 'INFO').upper()

# Empty means links are built from the incoming request's base URL
PUBLIC_BASE_URL = os.environ.get('EMPLOYEE_SERVICE_BASE_URL', '').rstrip('/')

SEED_DEMO_DATA = _env_flag('EMPLOYEE_SERVICE_SEED_DATA')

if SEED_DEMO_DATA:
    logger.info("Demo employee seeding ENABLED")

SERVER_HOST = os.environ.get('EMPLOYEE_SERVICE_HOST', '0.0.0.0')
SERVER_PORT = int(os.environ.get('EMPLOYEE_SERVICE_PORT', '8000'))
