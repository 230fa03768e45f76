import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status
from pydantic import ValidationError

from verifiable_ts.core.errors import TimeSeriesError
from verifiable_ts.utils.error import time_series_error_details, validation_error_details

_LOGGER = logging.getLogger(__name__)


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """@brief Map failures raised while serving a request to HTTP errors.

    @param action Short description of the work, used in logs and 500 details.
    @throws HTTPException HTTP 422 for core and record validation errors.
    @throws HTTPException HTTP 500 for unexpected runtime failures.
    """
    try:
        yield
    # Core errors carry their kind so clients can tell failures apart
    except TimeSeriesError as exc:
        _LOGGER.info("Rejected %s request (%s): %s", action, exc.kind, exc)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=time_series_error_details(exc),
        ) from exc
    except ValidationError as exc:
        _LOGGER.info("Rejected %s request: %s", action, exc)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=validation_error_details(exc),
        ) from exc
    except HTTPException:
        raise
    except Exception as exc:
        _LOGGER.exception("Unexpected error while computing %s", action)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Unexpected error while computing {action}.",
        ) from exc
