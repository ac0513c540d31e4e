from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
import time
from typing import Callable
import logging

logger = logging.getLogger(__name__)

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs every request with its status code and duration.

    The Authorization header is never logged.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Health probes are too chatty to log
        if request.url.path.startswith("/api/health"):
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        response.headers["X-Process-Time"] = f"{elapsed_ms:.1f}"
        return response

def add_middleware(app: FastAPI) -> None:
    """Add all middleware to the FastAPI application."""
    app.add_middleware(RequestLoggingMiddleware)
