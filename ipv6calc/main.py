"""FastAPI application for the IPv6 address calculator.

Runs directly on Uvicorn (ASGI server) and exposes the address engine
(parse, subnet plan, route summarization, batch parsing) as JSON endpoints.

Environment Variables:
    LOG_LEVEL: Logging level (default: INFO)

    CORS Configuration:
        CORS_ORIGINS: Comma-separated list of allowed CORS origins
                     If not set or empty, localhost development origins are used
                     Example: http://localhost:3000,http://localhost:5173

    Engine limits:
        PLAN_MAX_SUBNETS: Maximum subnets generated per plan request (default: 4096)
        BATCH_MAX_ADDRESSES: Maximum entries per batch request (default: 1000)
        ALLOCATION_PREFIX_LENGTH: Allocation boundary for subnet counts (default: 48)
"""

import logging
import os

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import (
    get_allocation_prefix_length,
    get_cors_origins,
    get_log_level,
    get_max_subnets,
    validate_configuration,
)
from .routers import health, ipv6

validate_configuration()

# Configure logging
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

logger.info(
    "Engine limits configured",
    extra={
        "max_subnets": get_max_subnets(),
        "allocation_prefix_length": get_allocation_prefix_length(),
    },
)

# Create FastAPI app
app = FastAPI(
    title="IPv6 Calculator API",
    description="IPv6 address parsing, classification, subnet planning and route summarization",
    version=__version__,
    docs_url="/api/v1/docs",  # Swagger UI
    redoc_url="/api/v1/redoc",  # ReDoc
    openapi_url="/api/v1/openapi.json",  # OpenAPI spec
)

cors_origins = get_cors_origins()
if not os.getenv("CORS_ORIGINS", "").strip():
    logger.warning("CORS: Using default localhost origins for development")
else:
    logger.info(f"CORS: Allowed origins: {', '.join(cors_origins)}")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(ipv6.router)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "IPv6 Calculator API",
        "version": __version__,
        "docs": "/api/v1/docs",
        "openapi": "/api/v1/openapi.json",
        "health": "/api/v1/health",
    }


def run():
    """Serve the app with Uvicorn (HOST/PORT from environment)."""
    uvicorn.run(
        "ipv6calc.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
