"""HTTP error mapping

Use case errors are raised as ClientError by the routes and rendered as
``{"error": {"code", "message", "reason"}}``.
"""

import logging
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from src.libs.result import Error
from src.app.errors import NotFoundError

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """
    Business error surfaced to the HTTP client

    Without an explicit status_code, NotFoundError maps to 404 and every
    other error to 400.
    """

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        if status_code is None:
            status_code = (
                status.HTTP_404_NOT_FOUND
                if isinstance(error, NotFoundError)
                else status.HTTP_400_BAD_REQUEST
            )
        self.status_code = status_code


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error.model_dump()},
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    # Raced past a uniqueness check or broke a foreign key
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "error": {
                "code": "CONSTRAINT_VIOLATION",
                "message": "The request conflicts with existing data",
                "reason": str(exc.orig),
            }
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
