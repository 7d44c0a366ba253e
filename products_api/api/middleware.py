"""Request correlation and access logging."""

import time
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def resolve_request_id(request: Request) -> str:
    """Return the caller's request id, or a fresh uuid4 when none was sent."""
    return request.headers.get(REQUEST_ID_HEADER) or str(uuid4())


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log one line when it finishes.

    The id is stored on ``request.state`` for the error handlers, bound to
    structlog's context for every log line emitted while serving, and
    echoed back in the ``X-Request-ID`` response header.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = resolve_request_id(request)
        request.state.request_id = request_id

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            started = time.perf_counter()
            status_code = 500
            try:
                response = await call_next(request)
                status_code = response.status_code
            finally:
                logger.info(
                    "Request completed",
                    method=request.method,
                    path=request.url.path,
                    query=str(request.query_params),
                    status_code=status_code,
                    duration_ms=round((time.perf_counter() - started) * 1000, 2),
                )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install the request id middleware."""
    app.add_middleware(RequestIdMiddleware)
