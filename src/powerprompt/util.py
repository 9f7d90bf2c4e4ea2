from __future__ import annotations


def format_duration(millis: float) -> str:
    """
    Format a duration given in milliseconds for display, in seconds if it's
    under a minute and in minutes otherwise.  Precision decreases as the
    duration grows so that the result stays at most four digits long.

    Each band is selected by the value as it will be displayed, so a duration
    that rounds up to the next band's lower bound is shown in that band (e.g.,
    59.96 seconds becomes ``1.00m`` rather than ``60.0s``).
    """
    seconds = millis / 1000
    minutes = seconds / 60
    if round(seconds, 2) < 10:
        return f"{seconds:.2f}s"
    elif round(seconds, 1) < 60:
        return f"{seconds:.1f}s"
    elif round(minutes, 2) < 10:
        return f"{minutes:.2f}m"
    elif round(minutes, 1) < 100:
        return f"{minutes:.1f}m"
    else:
        return f"{minutes:.0f}m"
