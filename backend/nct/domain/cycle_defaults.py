"""Next-cycle suggestion for the cycle creation form.

Pure domain function. The result only pre-fills the form; the operator can
override every field before the cycle is created.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

import structlog

from nct.domain.entities import Cycle, PlanningRhythm

logger = structlog.get_logger(__name__)

DEFAULT_CUSTOM_LENGTH_DAYS = 42

# (quarter number, start month, start day, end month, end day)
QUARTER_BOUNDS = (
    (1, 1, 1, 3, 31),
    (2, 4, 1, 6, 30),
    (3, 7, 1, 9, 30),
    (4, 10, 1, 12, 31),
)


@dataclass(frozen=True)
class CycleDefaults:
    """Suggested cycle fields. Empty name / None dates mean "let the user fill it in"."""

    name: str = ""
    start_date: date | None = None
    end_date: date | None = None


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _quarter_candidates(year: int) -> list[tuple[str, date, date]]:
    return [
        (f"Q{n} {year}", date(year, sm, sd), date(year, em, ed))
        for n, sm, sd, em, ed in QUARTER_BOUNDS
    ]


def _suggest_quarter(existing_cycles: list[Cycle], today: date) -> CycleDefaults:
    existing_names = {c.name.lower() for c in existing_cycles}
    candidates = _quarter_candidates(today.year) + _quarter_candidates(today.year + 1)

    for name, start, end in candidates:
        if end >= today and name.lower() not in existing_names:
            return CycleDefaults(name=name, start_date=start, end_date=end)

    # Both years fully pre-populated
    return CycleDefaults()


def _suggest_rolling(existing_cycles: list[Cycle], cycle_length_weeks: int, today: date) -> CycleDefaults:
    if existing_cycles:
        last_end = max(_as_date(c.end_date) for c in existing_cycles)
        start = max(last_end + timedelta(days=1), today)
    else:
        start = today

    end = start + timedelta(days=cycle_length_weeks * 7 - 1)
    # Positional numbering; can collide after deletions.
    return CycleDefaults(name=f"Cycle {len(existing_cycles) + 1}", start_date=start, end_date=end)


def suggest_cycle_defaults(
    rhythm: PlanningRhythm,
    cycle_length_weeks: int | None,
    existing_cycles: list[Cycle],
    now: datetime,
    custom_length_days: int = DEFAULT_CUSTOM_LENGTH_DAYS,
) -> CycleDefaults:
    """Propose name/start/end for the next cycle.

    Pure function -- no side effects, no DB access.

    Args:
        rhythm: Workspace planning rhythm
        cycle_length_weeks: Cycle length, only meaningful for the "cycles" rhythm
        existing_cycles: Cycles already in the workspace
        now: Current time (injectable for testing)
        custom_length_days: Span suggested for the "custom" rhythm

    Returns:
        CycleDefaults

    Rules:
        - quarters: first of Q1..Q4 for this year and next whose end date is
          today or later and whose "Q{n} {year}" name is not taken (case-insensitive).
          Empty defaults when all eight are taken.
        - cycles: starts the day after the latest existing end (never before today),
          lasts cycle_length_weeks * 7 days inclusive, named "Cycle {count + 1}".
        - custom: today through today + custom_length_days, no name.
    """
    today = _as_date(now)

    if rhythm == PlanningRhythm.QUARTERS:
        return _suggest_quarter(existing_cycles, today)

    if rhythm == PlanningRhythm.CYCLES:
        if cycle_length_weeks and cycle_length_weeks > 0:
            return _suggest_rolling(existing_cycles, cycle_length_weeks, today)
        logger.debug("cycle_length_missing", rhythm=str(rhythm), fallback=PlanningRhythm.CUSTOM.value)

    return CycleDefaults(
        name="",
        start_date=today,
        end_date=today + timedelta(days=custom_length_days),
    )
