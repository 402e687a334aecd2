"""
Exception handlers that translate domain errors into JSend responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status

from pos_api.common.errors import InternalError, NotFoundError, ValidationError
from pos_api.common.schemas import JSendResponse

logger = logging.getLogger(__name__)


def _jsend(status_code: int, response: JSendResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json", exclude_none=True))


def register_error_handlers(app: FastAPI) -> None:
    """
    Register the error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("%s %s - validation failed: %s", request.method, request.url.path, exc)
        return _jsend(
            status.HTTP_400_BAD_REQUEST,
            JSendResponse.fail({"message": "Validation error", "errors": exc.to_list()},
                               code=status.HTTP_400_BAD_REQUEST),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.warning("%s %s - %s", request.method, request.url.path, exc)
        return _jsend(
            status.HTTP_404_NOT_FOUND,
            JSendResponse.fail({"message": str(exc)}, code=status.HTTP_404_NOT_FOUND),
        )

    @app.exception_handler(InternalError)
    async def handle_internal_error(request: Request, exc: InternalError) -> JSONResponse:
        logger.error("%s %s - internal error: %s", request.method, request.url.path, exc)
        return _jsend(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            JSendResponse.error("Internal Server Error", code=status.HTTP_500_INTERNAL_SERVER_ERROR),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("%s %s - unexpected %s", request.method, request.url.path, type(exc).__name__)
        return _jsend(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            JSendResponse.error("Internal Server Error", code=status.HTTP_500_INTERNAL_SERVER_ERROR),
        )
