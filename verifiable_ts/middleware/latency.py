import logging
import time

from fastapi import Request

from verifiable_ts.telemetry.latency import LatencyRecord, LatencyTarget

_LOGGER = logging.getLogger(__name__)


def _target_from_path(path: str) -> LatencyTarget | None:
    """@brief Map an HTTP path to a latency bucket.

    @param path Request path (e.g., `/public-values/summary` or `/smoothing/ema`).
    @return `public_values` or `smoothing` for computation routes, otherwise `None`.
    """
    if path.startswith("/public-values/"):
        return "public_values"
    if path.startswith("/smoothing/"):
        return "smoothing"
    return None


async def track_request_latency(request: Request, call_next):
    """@brief FastAPI middleware that measures, logs and stores request latency.

    @param request Incoming FastAPI request object.
    @param call_next FastAPI middleware callback used to continue request handling.
    @return Response produced by downstream handlers.

    @details
    Latency is recorded only for successful (`2xx`) responses of computation
    routes. Failures to record are logged and never affect the response.
    """
    start_time = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start_time) * 1000.0

    _LOGGER.debug(
        "%s %s -> %d in %.3f ms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )

    target = _target_from_path(request.url.path)
    if target is not None and 200 <= response.status_code < 300:
        try:
            LatencyRecord().push_latency(target, elapsed_ms)
        except Exception as exc:
            _LOGGER.warning("Failed to store latency in Redis: %s", exc)

    return response
