"""FastAPI application serving the support widget and the admin ingestion hook."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .... import __version__
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import SupportDeskError
from ...common.exception_handler import (
    format_exception_json,
    get_error_code,
    get_http_status_code,
    log_exception,
)
from .routers import chat, documents, health

setup_logging(settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Support Desk Answer API",
    description=(
        "Answers support widget chat messages from ingested website content "
        "using keyword retrieval and extractive synthesis."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# The chat widget is embedded on customer sites, so allowed origins come from settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(chat.router)
app.include_router(documents.router)


def _error_response(request: Request, exc: Exception) -> JSONResponse:
    request_context = {"path": request.url.path, "method": request.method}
    log_exception(exc, extra_context=request_context)
    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=format_exception_json(exc, include_trace=settings.debug),
        headers={"X-Error-Code": get_error_code(exc)},
    )


@app.exception_handler(SupportDeskError)
async def support_desk_error_handler(request: Request, exc: SupportDeskError) -> JSONResponse:
    """Render support desk errors with their own code and mapped status."""
    return _error_response(request, exc)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything unexpected as SD_UNHANDLED so the widget still gets JSON."""
    return _error_response(request, exc)


@app.on_event("startup")
async def startup_event():
    logger.info(
        f"Support desk API v{__version__} starting "
        f"(store={settings.store_backend}, debug={settings.debug})"
    )


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Support desk API shutting down")


__all__ = ["app"]
