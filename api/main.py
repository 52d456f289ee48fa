"""
Anti-Bullshit API — HTTP Surface

POST /tools/{name} — Run a tool (analyze_claim, validate_sources, check_manipulation)
GET  /tools        — Tool definitions with input schemas
GET  /frameworks   — The rubric table and the configured default
GET  /health       — Health check
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from antibullshit import __version__
from antibullshit.config import settings
from antibullshit.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    ToolError,
)
from antibullshit.frameworks import list_frameworks
from antibullshit.logging import setup_logging, get_logger
from antibullshit.schemas.tools import (
    TOOL_DEFINITIONS,
    ErrorResponse,
    FrameworksResponse,
    HealthResponse,
    ToolResponse,
)
from antibullshit.tools import TOOLS, dispatch

logger = get_logger("api")

_STATUS_FOR_CODE = {
    INVALID_PARAMS: 400,
    METHOD_NOT_FOUND: 404,
    INTERNAL_ERROR: 500,
}


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Anti-Bullshit API starting",
                extra={"framework": settings.VALIDATION_FRAMEWORK})
    yield
    logger.info("Anti-Bullshit API shutting down")


app = FastAPI(
    title="Anti-Bullshit API",
    description="Claim analysis across epistemological frameworks and manipulation detection",
    version=__version__,
    lifespan=lifespan,
)

# CORS — set ANTIBULLSHIT_CORS_ORIGINS in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(ToolError)
async def tool_error_handler(request: Request, exc: ToolError):
    """Map tool failures to HTTP status codes, keeping the JSON-RPC code."""
    return JSONResponse(
        status_code=_STATUS_FOR_CODE.get(exc.code, 500),
        content=ErrorResponse(code=exc.code, detail=exc.message).model_dump(),
    )


@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions — return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(code=INTERNAL_ERROR, detail="Internal server error.").model_dump(),
    )


# ============================================================
# ROUTES
# ============================================================

@app.post("/tools/{name}", response_model=ToolResponse)
async def call_tool(name: str, arguments: Any = Body(None)):
    """Run a tool. The body is passed to the tool as its arguments."""
    result = dispatch(name, arguments, settings.VALIDATION_FRAMEWORK)
    return {
        "content": result.content(),
        "result": result.payload.model_dump(),
    }


@app.get("/tools")
async def get_tools():
    return {"tools": TOOL_DEFINITIONS}


@app.get("/frameworks", response_model=FrameworksResponse)
async def get_frameworks():
    return {
        "default": settings.VALIDATION_FRAMEWORK,
        "frameworks": list_frameworks(),
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return {
        "status": "operational",
        "version": __version__,
        "default_framework": settings.VALIDATION_FRAMEWORK,
        "tools": list(TOOLS),
    }


# --- Version Headers Middleware ---
@app.middleware("http")
async def add_version_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-AntiBullshit-Version"] = __version__
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
