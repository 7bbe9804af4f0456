# products_api/middleware.py

"""
HTTP middleware for the Products API: the cross-origin gate that runs before
routing, and one log line per request.
"""
import logging
import time
from typing import Optional, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse

logger = logging.getLogger(__name__)

CORS_ERROR = "Error de CORS"


def is_origin_allowed(origin: Optional[str], allowed_origins: Sequence[str]) -> bool:
    """
    Decide whether a request may proceed based on its Origin header.
    Requests without an Origin header are not cross-origin and always pass;
    otherwise the origin has to match one allowed entry exactly.
    """
    if origin is None:
        return True
    return origin in allowed_origins


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """Reject requests from origins outside the allow-list before they reach a route."""

    def __init__(self, app, allowed_origins: Sequence[str]):
        super().__init__(app)
        self.allowed_origins = list(allowed_origins)

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if not is_origin_allowed(origin, self.allowed_origins):
            logger.warning(f"Rejected request from origin {origin!r}: {request.method} {request.url.path}")
            return PlainTextResponse(CORS_ERROR, status_code=403)
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.3f} ms"
        )
        return response
