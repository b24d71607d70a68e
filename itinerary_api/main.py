import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from itinerary_api.api.routers import itinerary
from itinerary_api.core.config import settings
from itinerary_api.core.cors import CORS_HEADERS, add_cors_headers
from itinerary_api.core.errors import APIError, error_content
from itinerary_api.core.logging import setup_logging
from itinerary_api.domain.services.itinerary_service import unclassified_fault

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.project_name)

app.middleware("http")(add_cors_headers)

app.include_router(itinerary.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, APIError):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_content(str(exc.detail), **exc.extra),
        )
    message = "Method not allowed" if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content=error_content(message))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled server error: %s", exc)
    fault = unclassified_fault(exc)
    # Rendered outside the http middleware stack, so CORS headers are attached here.
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content(fault.message, details=fault.details),
        headers=CORS_HEADERS,
    )
