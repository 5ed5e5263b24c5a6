import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from src.app.utils.logging_util import loggers


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log every request with its status and duration.
    Headers are not logged since they may carry credentials.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        loggers["main"].info(f"Incoming request: {request.method} {request.url.path}")

        response = await call_next(request)

        time_taken = time.perf_counter() - start_time
        loggers["time_tracker"].info(
            f"{request.method} {request.url.path} -> {response.status_code} in {time_taken:.4f} seconds"
        )
        return response
