"""
Smart Home Device API - FastAPI Application

Main entry point for the backend API.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .config import settings
from .database import get_db, init_db
from .exceptions import DeviceNotFoundError, InvalidDeviceIDError, ValidationFailedError
from .logging_config import configure_logging
from .routers import device_types, devices

logger = logging.getLogger(__name__)

START_TIME = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    # Startup
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    # Initialize database tables
    init_db()

    logger.info(f"{settings.app_name} ready")
    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


# Create FastAPI application
app = FastAPI(
    title="Smart Home Device API",
    description="CRUD backend for smart home device records",
    version=settings.app_version,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(devices.router)
app.include_router(device_types.router)


@app.exception_handler(ValidationFailedError)
async def validation_failed_handler(request: Request, exc: ValidationFailedError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.errors})


@app.exception_handler(InvalidDeviceIDError)
async def invalid_device_id_handler(request: Request, exc: InvalidDeviceIDError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


@app.exception_handler(DeviceNotFoundError)
async def device_not_found_handler(request: Request, exc: DeviceNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid request body", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "database error"})


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint. Verifies the database answers a query."""
    uptime = round(time.monotonic() - START_TIME, 3)
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check database query failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "error",
                "message": "Database connection failed",
                "error": str(e),
            },
        )

    return {
        "status": "ok",
        "message": "Service is healthy",
        "uptime_seconds": uptime,
        "database": "connected",
    }


@app.get("/")
def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs"
    }


def run():
    """Run the API with uvicorn."""
    import uvicorn

    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    run()
