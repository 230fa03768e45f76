import json
from typing import cast

from pydantic import ValidationError

from verifiable_ts.core.errors import TimeSeriesError


def time_series_error_details(exc: TimeSeriesError) -> list[dict[str, object]]:
    """@brief Build a Pydantic-style 422 detail payload from a core error.

    @param exc Core error raised while validating or computing a series.
    @return List-formatted details carrying the error kind as `type`.
    """
    return [
        {
            "type": exc.kind,
            "loc": ["body"],
            "msg": str(exc),
            "input": None,
        }
    ]


def validation_error_details(exc: ValidationError) -> list[dict[str, object]]:
    """@brief Build a JSON-safe 422 detail payload from a Pydantic ValidationError.

    @param exc Pydantic validation error raised during payload conversion.
    @return List-formatted validation details safe to include in HTTPException detail.
    """
    return cast(list[dict[str, object]], json.loads(exc.json()))
