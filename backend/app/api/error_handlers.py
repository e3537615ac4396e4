"""
Custom exception handlers for FastAPI.
Errors are returned as short plain-text bodies rather than JSON.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from app.api.routes.receipts import INVALID_RECEIPT_DETAIL
from app.core.observability import sentry_capture

logger = logging.getLogger(__name__)


def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Undecodable JSON and wrongly shaped receipts are indistinguishable to the caller
    logger.info("Malformed request body on %s %s: %d error(s)", request.method, request.url.path, len(exc.errors()))
    return PlainTextResponse(INVALID_RECEIPT_DETAIL, status_code=HTTP_400_BAD_REQUEST)


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    sentry_capture(exc)
    return PlainTextResponse("Internal server error", status_code=HTTP_500_INTERNAL_SERVER_ERROR)
