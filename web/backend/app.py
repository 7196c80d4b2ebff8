#!/usr/bin/env python3
"""
ArcusPath Directory - FastAPI Application

Search and trust API for the LGBTQIA+ affirming provider directory.

Usage:
    uv run python -m web.backend.app

Then open:
    - http://localhost:8080/api/providers - Provider search
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from database.repositories import SqlProviderRepository
from database.seed import seed_providers
from .config import get_config
from .dependencies import get_db_manager
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    providers_router,
    categories_router,
    reports_router,
    admin_router
)
from .routers.reports import add_rate_limit_handlers

# Load configuration
config = get_config()

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.logging.level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def prepare_database() -> None:
    """Create tables and insert the sample providers when configured to."""
    db_manager = get_db_manager()
    db_manager.create_tables()

    if not config.database.seed_on_startup:
        return

    session = db_manager.SessionLocal()
    try:
        seed_providers(SqlProviderRepository(session))
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    prepare_database()
    yield


def create_app() -> FastAPI:
    """Build the FastAPI application with handlers and routers registered."""
    app = FastAPI(
        title="ArcusPath API",
        description="Trust-ranked search over affirming service providers",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # Configure rate limiting
    add_rate_limit_handlers(app)

    # Register exception handlers
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(providers_router)
    app.include_router(categories_router)
    app.include_router(reports_router)
    app.include_router(admin_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "arcuspath-api"}

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting ArcusPath API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level=config.logging.level.lower()
    )


if __name__ == "__main__":
    main()
