# client_orders/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from client_orders.adapters.configuration.config import settings
from client_orders.adapters.outbound.persistence.database import create_tables

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    """
    # Startup
    logger.info("Application starting up...")

    # Create database tables if they don't exist
    await create_tables()

    yield

    # Shutdown
    logger.info("Application shutting down...")


# Create FastAPI instance
app = FastAPI(
    title="Client Orders API",
    description="Clients, priced orders and bearer-token authentication",
    version="1.0.0",
    debug=settings.DEBUG,
    docs_url="/api-docs",
    redoc_url=None,
    lifespan=lifespan,
)

# Middlewares
from client_orders.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    validation_exception_handler,
)

# Added innermost first: errors become responses before they are logged,
# and every response, errors included, leaves through CORS
app.add_middleware(AsyncExceptionMiddleware)
app.add_middleware(AsyncRequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Routers
from client_orders.adapters.inbound.api.router import api_router

app.include_router(api_router)


@app.get("/", include_in_schema=False)
async def root():
    return {"message": "API is running..."}


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    spec = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    # Validation failures are answered with 400, drop the generated 422 docs
    for schema in ("HTTPValidationError", "ValidationError"):
        spec.get("components", {}).get("schemas", {}).pop(schema, None)

    for path in spec.get("paths", {}).values():
        for op in path.values():
            op.get("responses", {}).pop("422", None)

    app.openapi_schema = spec
    return spec


app.openapi = custom_openapi


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "client_orders.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
