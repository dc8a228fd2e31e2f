"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from cashflow_coach.api.middleware import RequestIDMiddleware, MetricsMiddleware
from cashflow_coach.api.v1 import affordability, forecast, insights, users
from cashflow_coach.infrastructure.observability.logging import setup_logging
from cashflow_coach.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Cash-Flow Coach",
        description="End-of-month forecasting, affordability checks, and spending insights",
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

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(forecast.router, prefix="/v1", tags=["forecast"])
    app.include_router(affordability.router, prefix="/v1", tags=["affordability"])
    app.include_router(insights.router, prefix="/v1", tags=["insights"])
    app.include_router(users.router, prefix="/v1", tags=["users"])

    return app


app = create_app()
