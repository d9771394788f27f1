"""
Error taxonomy and the FastAPI handlers that turn it into responses.

Repositories and services raise ``KasirException`` subclasses; the
routers never build error responses themselves.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class KasirException(Exception):
    """Base exception carrying the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"detail": self.message}
        if self.details:
            result["details"] = self.details
        return result


class NotFoundError(KasirException):
    """No row matched the id on read, update or delete."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class BadRequestError(KasirException):
    status_code = status.HTTP_400_BAD_REQUEST


class StoreError(KasirException):
    """Driver or I/O failure in the backing store.

    The driver message is forwarded as-is.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


# Path parameter name -> message for an unparseable id
INVALID_ID_MESSAGES = {
    "category_id": "Invalid Category ID",
    "product_id": "Invalid Product ID",
}


async def kasir_exception_handler(request: Request, exc: KasirException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report every request validation failure as 400 instead of FastAPI's 422."""
    errors = exc.errors()
    for error in errors:
        loc = error.get("loc", ())
        if len(loc) == 2 and loc[0] == "path" and loc[1] in INVALID_ID_MESSAGES:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"detail": INVALID_ID_MESSAGES[loc[1]]},
            )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid request",
            "errors": [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
                for error in errors
            ],
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(KasirException, kasir_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
