"""
Visitor Registry API
Main application file
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
import logging
import uvicorn

from app.core.config import settings
from app.core.registry import registry
from app.routers import employee, visitor

# ============================================================================
# Logging Configuration
# ============================================================================

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format=settings.log_format
)
logger = logging.getLogger(__name__)

# ============================================================================
# FastAPI Application
# ============================================================================

# Interactive docs are only served in development
docs_url = "/docs" if settings.is_development else None
redoc_url = "/redoc" if settings.is_development else None

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="In-memory visitor registry: meeting, courier and contractor check-in with sign-out tracking",
    docs_url=docs_url,
    redoc_url=redoc_url,
)

# ============================================================================
# CORS Configuration
# ============================================================================

if settings.cors_origins:
    # Credentials cannot be combined with a wildcard origin
    allow_credentials = settings.cors_origins != ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    """Return the error message itself as the JSON body"""
    return JSONResponse(status_code=exc.status_code, content=exc.detail, headers=exc.headers)

# ============================================================================
# Root & Health Endpoints
# ============================================================================

@app.get("/", tags=["Root"])
def root():
    """Root endpoint - API information"""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "documentation": docs_url,
        "endpoints": {
            "health": "/health",
            "employees": "/employees",
            "visitors": "/visitors",
            "on_site": "/visitors/on-site",
        }
    }

@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint for API monitoring"""
    return {
        "status": "ok",
        "message": f"{settings.app_name} is running",
        "version": settings.app_version,
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

# ============================================================================
# Event Handlers
# ============================================================================

@app.on_event("startup")
async def startup_event():
    """Actions to perform on application startup"""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name}")
    logger.info("=" * 60)
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Employees: {len(registry.list_employees())}")
    logger.info(f"Approved contractor companies: {', '.join(registry.approved_companies) or 'None'}")
    logger.info(f"CORS Origins: {settings.API_CORS_ORIGINS or 'Disabled'}")
    logger.info("=" * 60)

@app.on_event("shutdown")
async def shutdown_event():
    """Actions to perform on application shutdown"""
    logger.info("=" * 60)
    logger.info(f"Shutting down {settings.app_name}")
    logger.info("=" * 60)

# ============================================================================
# Router Registration
# ============================================================================

logger.info("Registering API routers...")
app.include_router(employee.router)  # Employee directory
app.include_router(visitor.router)  # Visitor check-in and sign-out
logger.info("All routers registered successfully")

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.LOG_LEVEL.lower()
    )
