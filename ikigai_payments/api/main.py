"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from ikigai_payments.api.middleware import RequestIDMiddleware, MetricsMiddleware
from ikigai_payments.api.v1 import history, payments, reference
from ikigai_payments.domain.history import PaymentHistoryStore
from ikigai_payments.domain.reference_data import sample_history
from ikigai_payments.infrastructure.observability.logging import setup_logging
from ikigai_payments.infrastructure.storage.session import init_storage
from ikigai_payments.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(history_store: PaymentHistoryStore | None = None) -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Ikigai Payments",
        description="School-fee payment scheduling and history",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # One history store per app session
    if history_store is None:
        history_store = PaymentHistoryStore(sample_history() if settings.seed_sample_history else ())
    app.state.history_store = history_store

    init_storage()

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
    app.include_router(reference.router, prefix="/v1", tags=["reference"])
    app.include_router(payments.router, prefix="/v1", tags=["payments"])
    app.include_router(history.router, prefix="/v1", tags=["history"])

    return app


app = create_app()
