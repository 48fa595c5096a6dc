"""Main entry point for the venue registry application.

Startup sequence:
1. Initialize DI container (connects to Redis)
2. Inject handler and DAOs into the routers
3. Serve HTTP with FastAPI
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from app.config import Settings
from app.container import Container
from app.routers import (
    venue_router,
    period_router,
    lookup_router,
    set_venue_handler,
    set_lookup_dao,
)
from app.middleware import PrometheusMiddleware

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global container
container: Container = None


def startup_sequence(settings: Settings):
    """Build dependencies and inject them into the routers."""
    global container

    logger.info("[Main] Starting startup sequence")
    logging.getLogger().setLevel(settings.log_level.upper())

    logger.info("[Main] Initializing DI container")
    container = Container(settings)

    logger.info("[Main] Injecting dependencies into routers")
    set_venue_handler(container.venue_handler)
    set_lookup_dao(container.redis_lookup_dao)

    logger.info("[Main] Startup sequence completed")


def shutdown_sequence():
    """Clean up resources on shutdown."""
    global container

    logger.info("[Main] Starting shutdown sequence")
    if container:
        container.shutdown()
        container = None
    logger.info("[Main] Shutdown sequence completed")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for startup and shutdown."""
    startup_sequence(Settings())
    yield
    shutdown_sequence()


# Create FastAPI app
settings = Settings()
app = FastAPI(
    title="Salles Registry API",
    description="Gaming venue registry: filtering, reporting periods and CSV exports",
    version="1.0.0",
    lifespan=lifespan,
)

# Add Prometheus metrics middleware
app.add_middleware(PrometheusMiddleware)

# Register routers at app creation time (before uvicorn starts)
app.include_router(venue_router)
app.include_router(period_router)
app.include_router(lookup_router)


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/metrics", response_class=PlainTextResponse)
def metrics():
    """Prometheus metrics endpoint for scraping."""
    return PlainTextResponse(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


if __name__ == "__main__":
    import uvicorn

    logger.info("[Main] Starting Salles Registry")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
