# vendor_api/core/errors.py
"""
Exception handlers turning every failure into the JSON error envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from vendor_api.core.config import settings
from vendor_api.core.exceptions import VendorAPIError

logger = logging.getLogger(__name__)


def _status(code: int) -> int:
    return status.HTTP_200_OK if settings.ERRORS_AS_HTTP_200 else code


async def app_error_handler(request: Request, exc: VendorAPIError) -> JSONResponse:
    logger.info(
        f"{exc.category} on {request.url.path}: {exc.message}",
        extra={"category": exc.category, "details": exc.details},
    )
    return JSONResponse(status_code=_status(exc.status_code), content=exc.to_dict())


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=_status(status.HTTP_500_INTERNAL_SERVER_ERROR),
        content={"status": "error", "message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(VendorAPIError, app_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
