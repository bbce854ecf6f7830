import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.common.exceptions import (
    ResourceNotFoundException,
    StorageException,
    ValidationException,
    internal_error_response,
    request_validation_exception_handler,
    resource_not_found_handler,
    storage_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from src.common.opentelemetry import setup_opentelemetry
from src.config import get_settings
from src.healthcheck.router import router as health_router
from src.tasks.router import router as tasks_router
from src.tasks.store import TaskStore

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    task_store = TaskStore(settings.TASKS_FILE)
    task_store.ensure()
    logger.info(f"Using task document {task_store.path}")
    app.state.task_store = task_store
    yield


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={**internal_error_response},
    version=settings.API_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings.OTEL_SERVICE_NAME, app)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(request_validation_exception_handler)
app.exception_handler(ValidationException)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(StorageException)(storage_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router)
