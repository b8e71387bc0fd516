from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
import logging
import sys
import uuid

from api import employees
from config.app_config import LOG_DIR, LOG_LEVEL, SERVER_HOST, SERVER_PORT
from constants import SERVICE_NAME, SERVICE_VERSION
from init_db import init_database
from services.schema_validator import SchemaValidator
from utils.logging_utils import set_logging_context, clear_logging_context


_logging_configured = False


def configure_logging():
    """Attach rotating file and console handlers to the root logger (once)."""
    global _logging_configured
    if _logging_configured:
        return
    _logging_configured = True

    root_logger = logging.getLogger()

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / "backend.log"

    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)

    for handler in (file_handler, console_handler):
        handler.setLevel(LOG_LEVEL)
        root_logger.addHandler(handler)

    root_logger.setLevel(LOG_LEVEL)
    logging.getLogger(__name__).info(f"Logging initialized: {log_file}")


configure_logging()
logger = logging.getLogger(__name__)

SCHEMA_STATUS = {"valid": True, "issues": []}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    global SCHEMA_STATUS

    logger.info("Initializing database...")
    init_database()

    SCHEMA_STATUS = SchemaValidator.check()
    if not SCHEMA_STATUS["valid"]:
        logger.error(f"Database schema validation failed: {SCHEMA_STATUS['issues']}")

    logger.info("Application startup complete")
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title=SERVICE_NAME,
    description="Employee records with hypermedia links",
    version=SERVICE_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_context(request: Request, call_next):
    """Tag every log line emitted while serving a request with its id."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    set_logging_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(employees.router, tags=["employees"])


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "schema_valid": SCHEMA_STATUS["valid"]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
