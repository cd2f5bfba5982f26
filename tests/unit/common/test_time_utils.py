from datetime import timedelta

import pytest

from cargobay.common.utils.time_utils import Timer, format_duration


@pytest.mark.parametrize(
    ("duration", "expected"),
    [
        (0, "0ms"),
        (-3, "0ms"),
        (0.25, "250ms"),
        (1.5, "1.50s"),
        (65, "1m 05s"),
        (timedelta(hours=1, minutes=2, seconds=3), "1h 02m 03s"),
    ],
)
def test_format_duration(duration, expected: str) -> None:
    assert format_duration(duration) == expected


def test_timer_context_manager() -> None:
    with Timer() as timer:
        assert timer.running

    assert not timer.running
    first = timer.elapsed
    assert first >= 0
    assert timer.elapsed == first


def test_unstarted_timer() -> None:
    timer = Timer()

    assert timer.elapsed == 0.0
    with pytest.raises(RuntimeError):
        timer.stop()
