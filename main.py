"""
Visitor Registry API
Server entry point
"""

import uvicorn

from app.core.config import settings
from app.main import app  # noqa: F401

if __name__ == "__main__":
    is_dev = not settings.is_production
    uvicorn.run(
        # Use import string so reload/workers work correctly (and avoid warnings).
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=is_dev and settings.reload,
        log_level=settings.LOG_LEVEL.lower()
    )
