import logging
from fastapi import Request, responses, exceptions
from starlette.exceptions import HTTPException as StarletteHTTPException
from config.setting import settings
from controller.contact import REQUIRED_FIELDS
from controller.subscriber import INVALID_EMAIL
from error import ServerError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Error interno del servidor."
INVALID_BODY_MESSAGE = "Solicitud inválida"

# Bodies rejected before reaching a pipeline answer with its own message
ROUTE_VALIDATION_MESSAGES = {
    f"{settings.API_PREFIX}/contact": REQUIRED_FIELDS,
    f"{settings.API_PREFIX}/subscribe": INVALID_EMAIL,
}


def _error_response(status_code: int, message: str) -> responses.JSONResponse:
    return responses.JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def validation_error_handler(
    request: Request, exec: exceptions.RequestValidationError
) -> responses.JSONResponse:
    """Validation Error Handler

    Request bodies that cannot be parsed or carry the wrong
    field types are reported as client errors with the
    same shape as every other failure.
    """
    route_message = ROUTE_VALIDATION_MESSAGES.get(request.url.path.rstrip("/"))
    if route_message:
        return _error_response(400, route_message)

    error = exec.errors()[0]
    if error.get("type") == "json_invalid":
        return _error_response(400, INVALID_BODY_MESSAGE)

    field = error.get("loc")[-1]
    message = error.get("msg")
    return _error_response(400, f"Invalid {field}: {message}")


def http_exceptions_handler(
    request: Request, exec: StarletteHTTPException
) -> responses.JSONResponse:
    """Handler for http exceptions raised by the framework"""
    return _error_response(exec.status_code, str(exec.detail))


def server_error_handler(request: Request, exec: ServerError) -> responses.JSONResponse:
    """Server error handler"""
    return _error_response(exec.status_code, str(exec.msg))


def unexpected_error_handler(request: Request, exec: Exception) -> responses.JSONResponse:
    """Last resort handler, the boundary always answers"""
    logger.exception(f"Unhandled error on {request.url.path}: {exec}")
    return _error_response(500, GENERIC_ERROR_MESSAGE)
