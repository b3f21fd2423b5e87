"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from penalty_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from penalty_gateway.api.v1 import penalty
from penalty_gateway.infrastructure.observability.logging import setup_logging
from penalty_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Penalty Gateway",
        description="Late-payment penalty schedules for monthly installment loans",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(penalty.router, prefix="/v1", tags=["penalties"])

    return app


app = create_app()
