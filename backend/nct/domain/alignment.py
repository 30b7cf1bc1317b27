"""Alignment score domain function.

Pure domain function for reducing structural gaps into a 0-100 completeness
score. No I/O, no side effects, fully deterministic.
"""

from collections.abc import Iterable

from nct.domain.gaps import Gap, Severity
from nct.domain.progress import clamp_score

SEVERITY_PENALTIES: dict[Severity, int] = {
    Severity.CRITICAL: 10,
    Severity.WARNING: 5,
    Severity.INFO: 2,
}


def compute_alignment_score(gaps: Iterable[Gap]) -> int:
    """Compute the alignment score for a list of gaps.

    Pure function -- order-independent, adding a gap never raises the score.

    Args:
        gaps: Findings from detect_gaps()

    Returns:
        Integer 0-100: 100 - 10 per critical - 5 per warning - 2 per info, clamped.

    Edge cases:
        - No gaps: returns 100
    """
    score = 100
    for gap in gaps:
        score -= SEVERITY_PENALTIES[gap.severity]
    return clamp_score(score)
