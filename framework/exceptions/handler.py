from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from framework.logging.logger import get_logger
from framework.response import ResponseModel
from framework.middleware.logging_md import TRACE_HEADER
from typing import Any
from framework.config import settings

logger = get_logger("exception_handler")

class BusinessException(Exception):
    """Base class for business exceptions."""
    def __init__(self, message: str, status_code: int = 400, code: int = 400, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.detail = detail


class NotFoundException(BusinessException):
    """Requested record is absent from the store."""
    def __init__(self, resource: str, id: int):
        super().__init__(
            f"{resource} not found: {id}",
            status_code=status.HTTP_404_NOT_FOUND,
            code=404,
            detail={"id": id},
        )
        self.resource = resource
        self.id = id


class BadInputException(BusinessException):
    """A field failed validation on create or update."""
    def __init__(self, field: str, message: str = None):
        super().__init__(
            message or f"Invalid value for field: {field}",
            status_code=status.HTTP_400_BAD_REQUEST,
            code=400,
            detail={"field": field},
        )
        self.field = field


def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    trace_id = getattr(request.state, "trace_id", "unknown")
    # Responses built outside LoggingMiddleware (uncaught errors) still need the header
    headers = {TRACE_HEADER: trace_id}

    if isinstance(exc, BusinessException):
        logger.warning(f"Trace[{trace_id}] - BusinessError: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ResponseModel.fail(code=exc.code, message=exc.message, data=exc.detail),
            headers=headers
        )

    if isinstance(exc, RequestValidationError):
        logger.error(f"Trace[{trace_id}] - ValidationError: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ResponseModel.fail(
                code=400,
                message="Invalid request parameters",
                data=jsonable_encoder(exc.errors())
            ),
            headers=headers
        )

    if isinstance(exc, SQLAlchemyError):
        logger.critical(f"Trace[{trace_id}] - DatabaseError: {str(exc)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ResponseModel.fail(code=500, message="Service temporarily unavailable"),
            headers=headers
        )

    logger.opt(exception=True).error(f"Trace[{trace_id}] - UncaughtException: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ResponseModel.fail(
            code=500,
            message="System busy, please try again later",
            data={"trace_id": trace_id} if settings.DEBUG else None
        ),
        headers=headers
    )
