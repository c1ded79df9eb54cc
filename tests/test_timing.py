import pytest

from bfc_rmq.timing import DAY, HOUR, MINUTE, format_duration


@pytest.mark.parametrize("time_ms, expected", [
    (0, "  0 ms"),
    (7, "  7 ms"),
    (999, "999 ms"),
    (1000, " 1.0 s"),
    (1001, " 1.1 s"),
    (12345, "12.4 s"),
    (MINUTE, "60.0 s"),
    (MINUTE + 1, " 1 min  1 s"),
    (HOUR, "60 min  0 s"),
    (HOUR + 1, " 1 h  1 min"),
    (DAY, "24 h  0 min"),
    (DAY + 1, " 1 d  1 h"),
    (-5, "  0 ms"),
    (12.9, " 12 ms"),
])
def test_format_duration(time_ms, expected):
    assert format_duration(time_ms) == expected
