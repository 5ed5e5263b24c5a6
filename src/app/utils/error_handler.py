from functools import wraps

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from src.app.utils.custom_exceptions import WorkflowError
from src.app.utils.logging_util import loggers


def error_response(error: str, details, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "details": details},
    )


def handle_exceptions(func):
    """A decorator to catch exceptions and return a consistent JSON error response."""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            result = await func(*args, **kwargs)
            return result
        except HTTPException:
            raise
        except WorkflowError as e:
            loggers["main"].error(f"{func.__name__} failed: {e.error_label}: {e.details}")
            return error_response(e.error_label, e.details, e.http_status)
        except Exception as e:
            loggers["main"].exception(f"Unexpected error in {func.__name__}: {e}")
            return error_response("Internal Server Error", str(e))

    return wrapper
