"""Greppy Filters FastAPI Application."""

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from greppy_filters.api.config import get_settings
from greppy_filters.api.dependencies import get_storage
from greppy_filters.api.routers import presets, search, symbols
from greppy_filters.config import PRESETS_STORAGE_KEY, config
from greppy_filters.config.logging_config import DEFAULT_LOG_FILE, setup_logging
from greppy_filters.exceptions import StorageError
from greppy_filters.storage import KeyValueStorage

settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Query parsing, symbol filtering and filter presets for the Greppy dashboard",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(search.router, prefix="/api/search", tags=["Search"])
app.include_router(presets.router, prefix="/api/presets", tags=["Presets"])
app.include_router(symbols.router, prefix="/api/symbols", tags=["Symbols"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": {
            "search": "/api/search",
            "presets": "/api/presets",
            "symbols": "/api/symbols",
        },
    }


@app.get("/health")
async def health_check(storage: KeyValueStorage = Depends(get_storage)):
    """Health check endpoint."""
    try:
        storage.get_item(PRESETS_STORAGE_KEY)
        return {"status": "healthy", "storage": "available"}
    except StorageError as e:
        return {"status": "degraded", "storage": "unavailable", "error": str(e)}


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    config.ensure_directories()
    setup_logging("DEBUG" if settings.debug else config.app.log_level, log_file=DEFAULT_LOG_FILE)
    uvicorn.run(app, host=settings.host, port=settings.port)
