"""
Tyre service backend - FastAPI application factory.

Routers for every entity, the dashboard and static serving of uploaded car
photos.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from config.settings import get_settings
from controllers.car_controller import CarController
from controllers.client_controller import ClientController
from controllers.completed_work_controller import CompletedWorkController
from controllers.dashboard_controller import DashboardController
from controllers.master_controller import MasterController
from controllers.order_controller import OrderController
from controllers.service_controller import ServiceController
from controllers.tire_controller import TireController
from repositories.base_repository_impl import (
    InstanceNotFoundError,
    InstanceReferencedError,
    StaleWriteError,
)
from services.photo_storage_service import PhotoStorageError, PhotoStorageService

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events"""
    storage = PhotoStorageService()
    storage.directory.mkdir(parents=True, exist_ok=True)
    logger.info(f"Serving uploaded photos from {storage.root}")
    yield
    logger.info("Shutting down tyre service API")


def register_exception_handlers(app: FastAPI):
    """Translate domain errors into HTTP responses."""

    @app.exception_handler(InstanceNotFoundError)
    async def not_found_handler(request: Request, exc: InstanceNotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(InstanceReferencedError)
    async def referenced_handler(request: Request, exc: InstanceReferencedError):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})

    @app.exception_handler(StaleWriteError)
    async def stale_write_handler(request: Request, exc: StaleWriteError):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})

    @app.exception_handler(PhotoStorageError)
    async def photo_storage_handler(request: Request, exc: PhotoStorageError):
        logger.error(f"Photo storage failure on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Photo storage failure"},
        )

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.errors(include_url=False, include_context=False)},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


def create_fastapi_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Tyre Service API",
        description="Clients, cars, orders and completed work of a tyre service shop",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(ClientController().router, prefix="/clients")
    app.include_router(CarController().router, prefix="/cars")
    app.include_router(TireController().router, prefix="/tires")
    app.include_router(OrderController().router, prefix="/orders")
    app.include_router(ServiceController().router, prefix="/services")
    app.include_router(MasterController().router, prefix="/masters")
    app.include_router(CompletedWorkController().router, prefix="/completed_works")
    app.include_router(DashboardController().router, prefix="/dashboard")

    @app.get("/health_check/", tags=["Health"])
    async def health_check():
        return {"status": "ok"}

    # Stored photo paths ("/uploads/cars/...") double as their URLs.
    app.mount(
        "/uploads",
        StaticFiles(directory=PhotoStorageService().root / "uploads", check_dir=False),
        name="uploads",
    )

    register_exception_handlers(app)
    return app
