import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from prometheus_client import make_asgi_app

from app.config import settings
from app.database import Base, engine
from app.middleware.metrics import MetricsMiddleware
from app.middleware.request_id import RequestIDMiddleware
from app.routers import graphql
from app.services.seeding import seed_restaurants
from app.utils.logging import setup_logging
from app.utils.tracing import setup_tracing

SERVICE_NAME = "eatmore-graphql"
SERVICE_VERSION = "1.0.0"

setup_logging(settings.log_level, SERVICE_NAME)
logger = logging.getLogger(__name__)

if settings.tracing_enabled:
    setup_tracing(SERVICE_NAME, settings.otlp_endpoint, SERVICE_VERSION)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up, creating database tables")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.tracing_enabled:
        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)

    if settings.seed_on_startup:
        await seed_restaurants()
    logger.info("Startup complete", extra={"graphql_path": settings.graphql_path})

    yield

    await engine.dispose()
    logger.info("Shutting down")


app = FastAPI(
    title="EatMore",
    description="Restaurants, menus and menu items over GraphQL",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

if settings.tracing_enabled:
    FastAPIInstrumentor.instrument_app(app)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.include_router(graphql.router, prefix=settings.graphql_path, tags=["graphql"])

# Expose Prometheus metrics at /metrics
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)


@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}
