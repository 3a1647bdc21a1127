"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from expiry_intel.api.middleware import RequestIDMiddleware, MetricsMiddleware
from expiry_intel.api.v1 import classify, extract, reminders, thresholds
from expiry_intel.infrastructure.database.models import Base
from expiry_intel.infrastructure.database.session import engine
from expiry_intel.infrastructure.observability.logging import setup_logging
from expiry_intel.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Settings store table
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Expiry Intel",
        description="Expiry date extraction from label text and urgency classification",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(extract.router, prefix="/v1", tags=["extraction"])
    app.include_router(classify.router, prefix="/v1", tags=["classification"])
    app.include_router(reminders.router, prefix="/v1", tags=["reminders"])
    app.include_router(thresholds.router, prefix="/v1", tags=["settings"])

    return app


app = create_app()
