import time
import uuid
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from task_tracker.observability.logging import request_id_var

logger = logging.getLogger("tracker.access")


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """
    One `request.start` and one `request.end` (or `request.error`) record per
    request. The request id is taken from `x-request-id` when the client sends
    one, echoed back in `X-Request-ID`, and stamped on every record logged
    while the request is handled.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        request.state.request_id = request_id
        start = time.perf_counter()
        base = {"category": "http", "method": request.method, "path": request.url.path}

        logger.info(
            "request.start",
            extra={
                **base,
                "event": "request.start",
                "query": str(request.url.query),
                "client": request.client.host if request.client else None,
            },
        )

        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "request.error",
                extra={**base, "event": "request.error", "duration_ms": _elapsed_ms(start)},
            )
            raise
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                **base,
                "event": "request.end",
                "request_id": request_id,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(start),
            },
        )
        return response
