"""
Human-readable durations for benchmark reports.
"""

MIL_SEC = 1
DEC_SEC = 100 * MIL_SEC
SECOND = 10 * DEC_SEC
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR


def _div_ceil(a: int, b: int) -> int:
    return (a + b - 1) // b


def format_duration(time_ms) -> str:
    """
    Convert a duration in milliseconds into a string with a fitting unit.

    Larger units round the smaller part up, e.g. 1001 ms -> " 1.1 s".
    Negative durations (e.g. after subtracting a reference) print as 0.

    Args:
        time_ms: Duration in milliseconds

    Returns:
        Fixed-width string such as " 12 ms", " 3.4 s", " 2 min  5 s"
    """
    time = max(0, int(time_ms))

    if time < SECOND:
        return f"{time:>3} ms"

    if time <= MINUTE:
        d_secs = _div_ceil(time, DEC_SEC)
        return f"{d_secs // 10:>2}.{d_secs % 10} s"

    if time <= HOUR:
        secs = _div_ceil(time, SECOND)
        return f"{secs // 60:>2} min {secs % 60:>2} s"

    if time <= DAY:
        mins = _div_ceil(time, MINUTE)
        return f"{mins // 60:>2} h {mins % 60:>2} min"

    hours = _div_ceil(time, HOUR)
    return f"{hours // 24:>2} d {hours % 24:>2} h"
