import logging

from fastapi import FastAPI

from verifiable_ts.api.healthcheck import router as healthcheck_router
from verifiable_ts.api.public_values import router as public_values_router
from verifiable_ts.api.smoothing import router as smoothing_router
from verifiable_ts.middleware.latency import track_request_latency
from verifiable_ts.utils.env import get_log_level


def configure_logging() -> None:
    """@brief Apply the `LOG_LEVEL` setting to the root logger."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging()

app = FastAPI(title="Verifiable Time Series API")
app.middleware("http")(track_request_latency)
app.include_router(public_values_router)
app.include_router(smoothing_router)
app.include_router(healthcheck_router)
