"""Request latency logging middleware."""

import logging
import re
import time
from typing import Callable

from fastapi import Request, Response

logger = logging.getLogger(__name__)

# Thresholds for log levels (in milliseconds)
SLOW_REQUEST_THRESHOLD_MS = 1000
VERY_SLOW_REQUEST_THRESHOLD_MS = 3000

HEALTH_PATHS = ("/health", "/health/ready")

_NUMERIC_SEGMENT = re.compile(r"/\d+(?=/|$)")
_CEP_SEGMENT = re.compile(r"/address/[^/]+$")


def normalize_path(path: str) -> str:
    """Collapse per-record path segments so log lines group by route.

    Numeric ids become ``{id}`` and postal codes become ``{cep}``.
    """
    path = _CEP_SEGMENT.sub("/address/{cep}", path)
    return _NUMERIC_SEGMENT.sub("/{id}", path)


async def latency_logging_middleware(request: Request, call_next: Callable) -> Response:
    """Log method, route, status and latency for every request.

    Slow requests and server errors are logged at elevated levels.
    Health checks are only logged at debug level.

    Args:
        request: The incoming request.
        call_next: The next middleware/handler in the chain.

    Returns:
        Response: The response from the handler.
    """
    start_time = time.perf_counter()

    method = request.method
    path = normalize_path(request.url.path)
    is_health_check = request.url.path in HEALTH_PATHS

    response = None
    error_occurred = False

    try:
        response = await call_next(request)
        return response
    except Exception:
        error_occurred = True
        raise
    finally:
        latency_ms = (time.perf_counter() - start_time) * 1000
        status_code = response.status_code if response else 500

        log_data = {
            "method": method,
            "path": path,
            "status_code": status_code,
            "latency_ms": round(latency_ms, 2),
        }
        log_msg = "%s %s - %d - %.2fms"
        args = (method, path, status_code, latency_ms)

        if is_health_check:
            logger.debug(log_msg, *args, extra=log_data)
        elif error_occurred or status_code >= 500:
            logger.error(log_msg, *args, extra=log_data)
        elif latency_ms > VERY_SLOW_REQUEST_THRESHOLD_MS:
            logger.error("VERY SLOW REQUEST: " + log_msg, *args, extra=log_data)
        elif latency_ms > SLOW_REQUEST_THRESHOLD_MS:
            logger.warning("SLOW REQUEST: " + log_msg, *args, extra=log_data)
        elif status_code >= 400:
            logger.warning(log_msg, *args, extra=log_data)
        else:
            logger.info(log_msg, *args, extra=log_data)
