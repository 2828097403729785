"""
SteadyDay Backend - FastAPI Application

This is the main entry point for the REST API.

Usage:
    uvicorn steadyday.api.main:app --host 127.0.0.1 --port 8000 --reload

    Or run directly:
    python -m steadyday.api.main
"""

import logging
from contextlib import asynccontextmanager

# Load .env file before anything else
from dotenv import load_dotenv
load_dotenv()

import yaml
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from steadyday import ARGS_DIR, __version__, database
from steadyday.api.models import ErrorResponse
from steadyday.api.routes import api_router
from steadyday.logging_config import setup_logging


# Configure structured logging
setup_logging()
logger = logging.getLogger(__name__)

# Configuration paths
CONFIG_PATH = ARGS_DIR / "api.yaml"


def load_config() -> dict:
    """Load API configuration from YAML."""
    if CONFIG_PATH.exists():
        with open(CONFIG_PATH) as f:
            return (yaml.safe_load(f) or {}).get("api", {})
    return {}


# Global config
api_config = load_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting SteadyDay API {__version__}...")

    # Creates the schema on first run
    conn = database.get_connection()
    conn.close()
    logger.info(f"Database ready at {database.DB_PATH}")

    yield

    logger.info("Shutting down SteadyDay API...")


# Create FastAPI application
app = FastAPI(
    title="SteadyDay API",
    description="Routines, focus, mood and habit tracking for ADHD brains",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=api_config.get(
        "allowed_origins", ["http://localhost:5173", "http://127.0.0.1:5173"]
    ),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail), code=f"HTTP_{exc.status_code}").model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report invalid request bodies and parameters as 400."""
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=f"{location}: {message}", code="INVALID_REQUEST").model_dump(),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error", code="INTERNAL_ERROR").model_dump(),
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(api_router)


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "steadyday.api.main:app",
        host=api_config.get("host", "127.0.0.1"),
        port=api_config.get("port", 8000),
        reload=True,
        log_level="info",
    )
