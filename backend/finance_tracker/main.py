"""Finance Tracker Backend API - Main entry point."""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from finance_tracker import __version__
from finance_tracker.config import get_settings
from finance_tracker.exceptions import FinanceTrackerError
from finance_tracker.logging_config import setup_logging
from finance_tracker.schemas.common import ErrorResponse
from finance_tracker.routers import (
    accounts_router,
    auth_router,
    dashboard_router,
    link_router,
    notifications_router,
    plaid_router,
    transactions_router,
)
from finance_tracker.services.link_sessions import get_link_registry


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger = setup_logging()
    logger.info("Starting %s API...", settings.app_name)
    if not settings.plaid_configured:
        logger.info("Plaid credentials not set; account linking runs in demo mode")
    yield
    # Shutdown
    get_link_registry().close_all()
    logger.info("Shutting down %s API...", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Personal finance dashboard with bank account linking",
    version=__version__,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FinanceTrackerError)
async def domain_exception_handler(request: Request, exc: FinanceTrackerError):
    """Map domain errors to their HTTP status."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions."""
    error = ErrorResponse(
        error="Internal server error",
        detail=str(exc) if settings.debug else None,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error.model_dump(exclude_none=True),
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": __version__,
    }


# Include routers with API prefix
api_prefix = settings.api_v1_prefix

app.include_router(auth_router, prefix=api_prefix)
app.include_router(accounts_router, prefix=api_prefix)
app.include_router(dashboard_router, prefix=api_prefix)
app.include_router(link_router, prefix=api_prefix)
app.include_router(plaid_router, prefix=api_prefix)
app.include_router(transactions_router, prefix=api_prefix)
app.include_router(notifications_router, prefix=api_prefix)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs" if settings.debug else "Disabled in production",
        "api": settings.api_v1_prefix,
        "plaid": "configured" if settings.plaid_configured else "demo",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "finance_tracker.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )
