import logging
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"


def _route_template(request: Request) -> str:
    # "/courses/{slug}/lessons/{lesson_index}" groups every lesson page under one key
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id, times it and logs one line per catalog hit."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"[{request_id}] {request.method} {request.url.path} failed",
                extra={"request_id": request_id, "route": _route_template(request)},
            )
            raise

        elapsed = time.perf_counter() - started
        route = _route_template(request)
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            f"[{request_id}] {request.method} {route} -> {response.status_code} ({elapsed * 1000:.1f} ms)",
            extra={
                "request_id": request_id,
                "route": route,
                "path": request.url.path,
                "status_code": response.status_code,
                "user_id": request.headers.get("X-User-Id"),
            },
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.4f}"
        return response
