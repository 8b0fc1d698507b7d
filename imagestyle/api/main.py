"""imagestyle API - image style configuration service.

This API normalizes image style configuration without any editor runtime:
- Built-in catalog (arrangements, groups, icon aliases)
- Default styles configuration per capability combination
- Normalization and validation of user styles configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from imagestyle import __version__
from imagestyle.api.routes import catalog, styles
from imagestyle.config import configure_logging
from imagestyle.styles.registry import get_default_catalog

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: Pre-load the default catalog
    logger.info("Loading default catalog...")
    default_catalog = get_default_catalog()
    stats = default_catalog.get_stats()
    logger.info(
        f"Loaded {stats['arrangements_loaded']} arrangements, "
        f"{stats['groups_loaded']} groups, {stats['icons_loaded']} icons"
    )

    logger.info("imagestyle API ready")
    yield
    # Shutdown
    logger.info("Shutting down imagestyle API")


# Create FastAPI app
app = FastAPI(
    title="imagestyle API",
    description="""
## Image Style Configuration Service

Normalizes image style configuration for rich-text editors.
Hosts call this API to:

- **Inspect the catalog**: built-in arrangements, groups and icon aliases
- **Bootstrap configuration**: default styles for the active capabilities
- **Normalize configuration**: merge user entries with defaults, drop
  unsupported arrangements and dangling group items, and get diagnostics

### Key Endpoints

- `GET /v1/catalog/arrangements` - List built-in arrangements
- `GET /v1/styles/defaults?block=true&inline=true` - Default configuration
- `POST /v1/styles/normalize` - Normalize a styles configuration
""",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(catalog.router, prefix="/v1")
app.include_router(styles.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "imagestyle API",
        "version": __version__,
        "description": "Image style configuration normalization",
        "docs": "/docs",
        "endpoints": {
            "catalog": "/v1/catalog",
            "styles": "/v1/styles",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    stats = get_default_catalog().get_stats()

    return {
        "status": "healthy",
        "arrangements_loaded": stats["arrangements_loaded"],
        "groups_loaded": stats["groups_loaded"],
        "icons_loaded": stats["icons_loaded"],
    }


@app.get("/v1")
async def api_v1_root():
    """API v1 root with available endpoints."""
    stats = get_default_catalog().get_stats()

    return {
        "version": "v1",
        "resources": {
            "catalog": {
                "count": stats["arrangements_loaded"] + stats["groups_loaded"],
                "endpoints": [
                    "GET /v1/catalog/arrangements",
                    "GET /v1/catalog/arrangements/{name}",
                    "GET /v1/catalog/groups",
                    "GET /v1/catalog/groups/{name}",
                    "GET /v1/catalog/icons",
                    "GET /v1/catalog/stats",
                ],
            },
            "styles": {
                "endpoints": [
                    "GET /v1/styles/defaults",
                    "POST /v1/styles/normalize",
                ],
            },
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "imagestyle.api.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
    )
