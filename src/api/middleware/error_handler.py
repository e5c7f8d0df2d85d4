"""Global exception handling."""

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger()


def _error_body(error: str, message: str, request_id: str) -> dict:
    return {"error": error, "message": message, "request_id": request_id}


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map uncaught exceptions to JSON errors carrying the request id.

    ValueError -> 400, LookupError -> 404, anything else -> 500 with a generic
    message so internals never leak to the client.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    if isinstance(exc, ValueError):
        logger.warning("bad_request", request_id=request_id, error=str(exc))
        return JSONResponse(
            status_code=400, content=_error_body("bad_request", str(exc), request_id)
        )

    if isinstance(exc, LookupError):
        logger.warning("not_found", request_id=request_id, error=str(exc))
        return JSONResponse(
            status_code=404, content=_error_body("not_found", str(exc), request_id)
        )

    logger.exception("unhandled_exception", request_id=request_id, error=str(exc))
    return JSONResponse(
        status_code=500,
        content=_error_body(
            "internal_server_error", "An unexpected error occurred", request_id
        ),
    )
