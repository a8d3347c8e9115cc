"""
Custom middleware for the FastAPI application.

Every request is tagged with a request id. A caller-supplied ``X-Request-ID``
is reused; otherwise a fresh one is generated.
"""
import time
import logging
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"
MAX_REQUEST_ID_LENGTH = 128

# Set up logging
logger = logging.getLogger(__name__)

def resolve_request_id(request: Request) -> str:
    """
    Reuse the caller's request id when it is usable, else generate one.
    """
    incoming = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH and incoming.isprintable():
        return incoming
    return uuid.uuid4().hex

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request with its outcome and duration.

    Server errors are logged at WARNING, everything else at INFO.
    """
    async def dispatch(self, request: Request, call_next):
        request_id = resolve_request_id(request)
        request.state.request_id = request_id
        route = f"{request.method} {request.url.path}"
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(f"[{request_id}] {route} raised after {elapsed_ms:.1f}ms")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed_ms:.1f}ms"

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(level, f"[{request_id}] {route} -> {response.status_code} in {elapsed_ms:.1f}ms")
        return response


def setup_middlewares(app):
    """
    Set up all custom middlewares for the application.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(RequestLoggingMiddleware)
