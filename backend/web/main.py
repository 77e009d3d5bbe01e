"EcoRoot auth service"
from __future__ import annotations

import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from backend.web.auth_utils import AppCredentialError
from backend.web.config import ensure_secure_config_on_startup, settings
from backend.web.logging_config import configure_logging
from backend.web.routes.auth import INTERNAL_ERROR, auth_router
from backend.web.routes.health import health_router

configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)
logger = structlog.get_logger()

# Minimal production safety checks (fail-fast on insecure config)
ensure_secure_config_on_startup()

app = FastAPI(
    title="EcoRoot Auth",
    description="Sign-up and sign-in proxy for the EcoRoot identity provider",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return response


@app.exception_handler(AppCredentialError)
async def app_credential_handler(request: Request, exc: AppCredentialError):
    logger.warning("app_credential_rejected", path=request.url.path, reason=exc.message)
    return JSONResponse(status_code=401, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Keep the {error} contract; field details stay in the logs.
    logger.warning("invalid_request_body", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        exc_type=type(exc).__name__,
    )
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


app.include_router(health_router)
app.include_router(auth_router, prefix=settings.route_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.web.main:app", host="0.0.0.0", port=8000)
