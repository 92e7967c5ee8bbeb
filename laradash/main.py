"""
LaraDashboard Builder

FastAPI application: builder, email and module APIs plus health checks.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from laradash.api.deps import Modules, get_builder_service, get_module_manager
from laradash.api.middleware.request_id import REQUEST_ID_HEADER, RequestIdMiddleware
from laradash.api.v1 import router as api_v1_router
from laradash.config import Settings, get_settings
from laradash.logging_config import configure_logging, get_logger
from laradash.schemas.common import HealthResponse

settings = get_settings()
logger = get_logger(__name__)

DEV_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def cors_origins(config: Settings) -> List[str]:
    """Dev servers always; the site itself too once deployed."""
    if config.debug or config.environment == "development":
        return list(DEV_ORIGINS)
    return [config.app_url, *DEV_ORIGINS]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    configure_logging(
        log_level=settings.log_level,
        environment=settings.environment,
        debug=settings.debug,
        service=settings.project_name,
    )
    booted = get_module_manager().boot_enabled(get_builder_service())
    logger.info(
        "%s v%s ready, modules: %s",
        settings.project_name,
        settings.version,
        ", ".join(booted) or "none",
    )
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.project_name,
    description="""
    Block-based content builder for pages and emails.

    - **Blocks**: registry of block types with page and email output
    - **Dynamic blocks**: server-side rendering of `data-lara-block` placeholders
    - **Emails**: template variables, previews and message composition
    - **Modules**: plugins contributing blocks, render callbacks and hooks
    """,
    version=settings.version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Added last so CORS wraps the request ID middleware
app.add_middleware(RequestIdMiddleware, slow_request_ms=settings.slow_request_ms)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(settings),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(
    request: Request,
    status_code: int,
    content: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """JSON error body carrying the request ID header when one is bound."""
    merged = dict(headers or {})
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        merged[REQUEST_ID_HEADER] = request_id
    return JSONResponse(status_code=status_code, content=content, headers=merged)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return error_response(request, exc.status_code, {"detail": exc.detail}, exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """422 with one entry per invalid field."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    return error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        {"detail": "Validation error", "errors": errors},
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    # Unknown modules, bad block definitions
    return error_response(request, status.HTTP_400_BAD_REQUEST, {"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content: Dict[str, Any] = {
        "detail": str(exc) if settings.debug else "Internal server error",
        "request_id": getattr(request.state, "request_id", None),
    }
    if settings.debug:
        content["type"] = type(exc).__name__
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, content)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(modules: Modules):
    return HealthResponse(status="ok", version=settings.version, modules=len(modules.all()))


@app.get("/", tags=["Root"])
async def root():
    """Service name, version and API prefix."""
    return {
        "name": settings.project_name,
        "version": settings.version,
        "docs": "/docs" if settings.debug else "disabled",
        "api": {"v1": settings.api_v1_prefix},
    }


app.include_router(api_v1_router, prefix=settings.api_v1_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("laradash.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
