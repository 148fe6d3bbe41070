"""
Trainer FastAPI Application

Main entry point for the Trainer API: conversational daily check-in
intake and safety-gated workout plans.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Common library imports
from common.utils import success_response, error_response, APIException

# App-specific imports
from trainer.config import settings

# Import routers
from trainer.routers import intake_router, plan_router

# Import service initialization
from trainer.dependencies import init_all_services


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Validates configuration and creates the shared AI provider once.
    """
    # Startup
    logger.info("Starting Trainer API...")

    settings.validate_required()

    init_all_services(settings)
    logger.info(f"All services initialized (AI provider: {settings.AI_PROVIDER})")

    yield

    # Shutdown
    logger.info("Trainer API shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Trainer API",
    description="Conversational daily check-in intake with safety-gated workout plans",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Error Envelope
# =============================================================================
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Render API exceptions in the standard error envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, code=exc.code, details=exc.details),
        headers=exc.headers,
    )


# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(intake_router, prefix=API_PREFIX, tags=["Intake"])
app.include_router(plan_router, prefix=API_PREFIX, tags=["Plan"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Reports the API version and the configured AI provider.
    """
    return success_response({
        "status": "ok",
        "version": VERSION,
        "aiProvider": settings.AI_PROVIDER,
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
