"""
Diagnostic Intake Gateway
=========================

FastAPI app serving the diagnostic-form submission endpoint.

Endpoints:
- GET /: Health check + build info
- GET /health: Kubernetes health check
- POST /api/submit: Diagnostic form submission
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from diagnostic_gateway import __version__
from diagnostic_gateway.config import (
    BUILD_ID,
    GITHUB_COMMIT,
    CORS_ALLOW_ORIGINS,
    LOG_LEVEL,
    validate_config,
    print_config_summary,
)
from diagnostic_gateway.errors import SubmissionError, MethodNotAllowed
from diagnostic_gateway.models.responses import ErrorResponse, HealthResponse
from diagnostic_gateway.api import submit

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# ============================================================
# Lifespan Context Manager
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Report configuration on startup.

    Missing configuration is reported, not fatal: the gateway still starts so
    health checks work, and affected requests fail with a 500.
    """
    print_config_summary()
    try:
        validate_config()
        print("✅ Configuration valid")
    except ValueError as e:
        print(f"⚠️  Configuration warning: {e}")
        print("⚠️  Submissions will fail until configuration is fixed.")
    print("")

    yield

    print("🛑 Diagnostic intake gateway shut down")

# ============================================================
# Create FastAPI App
# ============================================================

app = FastAPI(
    title="Diagnostic Intake Gateway",
    description="Validated, de-duplicated diagnostic form submissions",
    version=__version__,
    lifespan=lifespan
)

# ============================================================
# CORS Middleware
# ============================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["POST"],
    allow_headers=["*"],
)

# ============================================================
# Error Rendering
# ============================================================

@app.exception_handler(SubmissionError)
async def submission_error_handler(request: Request, exc: SubmissionError):
    """Render gateway errors as {"error": message} (no framework "detail" key)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


@app.exception_handler(StarletteHTTPException)
async def routing_error_handler(request: Request, exc: StarletteHTTPException):
    """
    The router raises 405 for any method a route does not accept; render it
    like MethodNotAllowed. Every other status keeps FastAPI's default body.
    """
    if exc.status_code == MethodNotAllowed.status_code:
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=MethodNotAllowed.message).model_dump(),
            headers=getattr(exc, "headers", None),
        )
    return await http_exception_handler(request, exc)

# ============================================================
# Include API Routers
# ============================================================

app.include_router(submit.router)

# ============================================================
# Health Check Endpoints
# ============================================================

@app.get("/", response_model=HealthResponse)
async def root():
    """
    Health check + build info.

    Returns gateway status, build ID, and commit hash for reproducibility.
    """
    return HealthResponse(
        service="diagnostic-intake-gateway",
        status="ok",
        build_id=BUILD_ID,
        github_commit=GITHUB_COMMIT,
        timestamp=datetime.now(timezone.utc).isoformat()
    )


@app.get("/health")
async def health():
    """
    Kubernetes health check.

    Simple endpoint for container orchestration health checks.
    """
    return {"status": "healthy"}


# ============================================================
# Run Server
# ============================================================

def main():
    import uvicorn

    print("=" * 60)
    print("🚀 Starting Diagnostic Intake Gateway")
    print("=" * 60)
    print(f"Build ID: {BUILD_ID}")
    print(f"GitHub Commit: {GITHUB_COMMIT}")
    print("=" * 60)

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level=LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
