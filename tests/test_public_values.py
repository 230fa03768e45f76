import pytest
from pydantic import TypeAdapter

from verifiable_ts.core.commitment import commit
from verifiable_ts.core.errors import InvalidParameterError
from verifiable_ts.core.fixed_point import SCALE, decode, encode
from verifiable_ts.core.public_values import (
    assemble_public_values,
    build_moving_average_public_values,
    build_summary_public_values,
)
from verifiable_ts.core.time_series import TimeSeries
from verifiable_ts.schemas.public_values import (
    MovingAveragePublicValues,
    PublicValues,
    SummaryPublicValues,
)


def _sample_series() -> TimeSeries:
    return TimeSeries([1, 2, 3, 4, 5], [1.0, 2.0, 3.0, 4.0, 5.0])


def test_summary_public_values_fields():
    series = TimeSeries([10, 20, 30], [1.0, 2.0, 3.0])

    record = build_summary_public_values(series)

    assert isinstance(record, SummaryPublicValues)
    assert record.start_timestamp == 10
    assert record.end_timestamp == 30
    assert record.values_hash == commit(series).as_int()
    assert record.mean == 2 * SCALE
    assert record.median == 2 * SCALE
    assert record.std_dev == encode(series.std_dev()).value
    assert abs(decode(record.std_dev) - 0.816496580927726) < 1e-9


def test_summary_canonical_field_order():
    record = build_summary_public_values(TimeSeries([10, 20, 30], [1.0, 2.0, 3.0]))

    assert record.canonical_fields() == (
        record.start_timestamp,
        record.end_timestamp,
        record.values_hash,
        record.mean,
        record.median,
        record.std_dev,
    )


def test_summary_drops_sign_of_negative_statistics():
    record = build_summary_public_values(TimeSeries([1, 2, 3], [-1.0, -2.0, -3.0]))

    assert record.mean == 2 * SCALE
    assert record.median == 2 * SCALE


def test_moving_average_public_values_fields():
    series = _sample_series()

    record = build_moving_average_public_values(series, 3)

    assert isinstance(record, MovingAveragePublicValues)
    assert record.start_timestamp == 1
    assert record.end_timestamp == 5
    assert record.window_size == 3
    assert record.moving_averages == [
        SCALE,
        3 * SCALE // 2,
        2 * SCALE,
        3 * SCALE,
        4 * SCALE,
    ]
    assert record.canonical_fields() == (
        1,
        5,
        record.values_hash,
        3,
        record.moving_averages,
    )


def test_moving_average_hash_commits_to_input_series():
    series = _sample_series()

    record = build_moving_average_public_values(series, 3)

    assert record.values_hash == commit(series).as_int()
    assert record.values_hash != commit(series.moving_average(3)).as_int()


def test_moving_average_rejects_zero_window():
    with pytest.raises(InvalidParameterError):
        build_moving_average_public_values(_sample_series(), 0)


def test_assemble_public_values_selects_mode():
    series = _sample_series()

    assert isinstance(assemble_public_values(series), SummaryPublicValues)
    assert isinstance(assemble_public_values(series, 2), MovingAveragePublicValues)


def test_public_values_union_is_tagged():
    adapter = TypeAdapter(PublicValues)
    summary = build_summary_public_values(_sample_series())
    moving = build_moving_average_public_values(_sample_series(), 2)

    assert adapter.validate_python(summary.model_dump()) == summary
    assert adapter.validate_python(moving.model_dump()) == moving
    assert summary.model_dump()["kind"] == "summary"
    assert moving.model_dump()["kind"] == "moving_average"
