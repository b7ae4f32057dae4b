# ventech_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ventech_api.common.config import Settings, get_settings
from ventech_api.router.routers import include_routers

logger = logging.getLogger(__name__)

def configure_logging(settings: Settings) -> None:
    # Centralized logging configuration
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

# Lifespan context manager for startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"Ventech API server running on port {settings.PORT}")
    logger.info(f"Frontend: http://localhost:{settings.PORT}")
    logger.info(f"API: http://localhost:{settings.PORT}/api")
    if not settings.email_configured:
        logger.warning("RESEND_API_KEY is not set; contact form submissions will be rejected")
    yield
    logger.info("Shutting down gracefully")

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application around a single Settings instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Ventech API",
        description="Backend for the BlackBugs Technologies website: contact form relay and SPA hosting.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middleware for CORS using allowed origins from settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers from a separate file
    include_routers(app)
    return app

settings = get_settings()
configure_logging(settings)
app = create_app(settings)

def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
