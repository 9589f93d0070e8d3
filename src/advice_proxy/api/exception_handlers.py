"""Translate failures into HTTP responses.

AdviceProxyError subclasses carry their own status code. Anything else
that reaches the top of the stack becomes a 500 with a diagnostic message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from advice_proxy.dto import ErrorResponse
from advice_proxy.errors import AdviceProxyError

logger = logging.getLogger(__name__)


def error_response(exc: AdviceProxyError) -> JSONResponse:
    """Render an AdviceProxyError as a JSON error body."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=exc.message).model_dump(),
    )


async def handle_advice_proxy_error(request: Request, exc: AdviceProxyError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.__cause__ or exc,
        )
    return error_response(exc)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail=f"Unhandled internal error: {exc}").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AdviceProxyError, handle_advice_proxy_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
