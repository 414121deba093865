"""Exception handlers for the RoomLog API.

Every failure is answered with the same envelope:

    {"success": false, "message": "<error description>"}

By default every failure uses HTTP 400. With ``ROOMLOG__TYPED_ERROR_STATUS``
enabled the status follows the error kind instead.

Unexpected exceptions are converted inside ``RequestLoggingMiddleware``, which
sits beneath CORS, so those responses carry CORS headers and the request id.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from roomlog.core.exceptions import ErrorCode, RoomLogError
from roomlog.core.logger import get_logger

logger = get_logger(__name__)

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIAL: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_IDENTITY: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(code: ErrorCode, typed: bool) -> int:
    if not typed:
        return status.HTTP_400_BAD_REQUEST
    return ERROR_CODE_TO_STATUS.get(code, status.HTTP_400_BAD_REQUEST)


def error_response(request: Request, code: ErrorCode, message: str) -> JSONResponse:
    typed = getattr(request.app.state, "typed_error_status", False)
    logger.warning(
        "Request failed",
        error_code=code.value,
        error_message=message,
        method=request.method,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_for(code, typed),
        content={"success": False, "message": message},
    )


async def roomlog_error_handler(request: Request, exc: RoomLogError) -> JSONResponse:
    return error_response(request, exc.code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return error_response(request, ErrorCode.VALIDATION_ERROR, "; ".join(parts) or "Invalid request")


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    return error_response(request, ErrorCode.STORE_ERROR, str(exc))


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RoomLogError, roomlog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
