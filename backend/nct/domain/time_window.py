"""Time-window math for cycle progress bars.

Pure domain function. "now" is always passed in, never read from the clock.
"""

import math
from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone

from nct.domain.entities import Cycle
from nct.domain.progress import clamp, round_half_up

WEEK = timedelta(weeks=1)


@dataclass(frozen=True)
class TimeWindow:
    """Where "now" sits inside a start/end window."""

    inside_window: bool
    elapsed_fraction: float
    current_week: int
    total_weeks: int
    percent: int


def compute_time_window(start: datetime, end: datetime, now: datetime) -> TimeWindow:
    """Compute elapsed fraction, week number and percent for a window.

    Pure function -- no side effects, never raises on odd input.

    Args:
        start: Window start instant
        end: Window end instant
        now: Reference instant (injectable for testing)

    Returns:
        TimeWindow with:
        - total_weeks: max(1, round(span / 1 week))
        - elapsed_fraction: (now - start) / span clamped to [0, 1]
        - current_week: ceil(elapsed_fraction * total_weeks) clamped to [1, total_weeks]
        - percent: round(elapsed_fraction * 100)
        - inside_window: start <= now <= end

    Edge cases:
        - end <= start: treated as fully elapsed (fraction 1.0, percent 100)
    """
    span = end - start
    total_weeks = max(1, round_half_up(span / WEEK))

    if span <= timedelta(0):
        elapsed_fraction = 1.0
    else:
        elapsed_fraction = clamp((now - start) / span, 0.0, 1.0)

    current_week = int(clamp(math.ceil(elapsed_fraction * total_weeks), 1, total_weeks))

    return TimeWindow(
        inside_window=start <= now <= end,
        elapsed_fraction=elapsed_fraction,
        current_week=current_week,
        total_weeks=total_weeks,
        percent=round_half_up(elapsed_fraction * 100),
    )


def as_utc_datetime(value) -> datetime:
    """Promote a date to midnight UTC; attach UTC to naive datetimes."""
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def compute_cycle_window(cycle: Cycle, now: datetime) -> TimeWindow:
    """Time window for a cycle's start/end dates."""
    return compute_time_window(
        as_utc_datetime(cycle.start_date),
        as_utc_datetime(cycle.end_date),
        as_utc_datetime(now),
    )
