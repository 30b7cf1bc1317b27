"""Operational health scoring.

Pure domain function. Independent of alignment: alignment measures how
complete the strategy tree is, health measures how current work is going.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from nct.domain.entities import (
    Commitment,
    CommitmentStatus,
    Narrative,
    NarrativeStatus,
    Task,
    TaskStatus,
    is_overdue,
)
from nct.domain.progress import clamp_score, compute_completion_percent

DEFAULT_STALE_AFTER_DAYS = 30

AT_RISK_NARRATIVE_PENALTY = 10
AT_RISK_COMMITMENT_PENALTY = 5
BLOCKED_TASK_PENALTY = 2

ON_TRACK_COMMITMENT_STATUSES = frozenset({CommitmentStatus.ACTIVE, CommitmentStatus.DRAFT})
# Commitments that can no longer be "blocked" by their tasks.
SETTLED_COMMITMENT_STATUSES = frozenset({
    CommitmentStatus.AT_RISK,
    CommitmentStatus.COMPLETED,
    CommitmentStatus.ARCHIVED,
})


class HealthStatus(StrEnum):
    HEALTHY = "healthy"
    NEEDS_ATTENTION = "needs_attention"
    AT_RISK = "at_risk"


@dataclass(frozen=True)
class HealthStats:
    active_narratives: int = 0
    total_narratives: int = 0
    at_risk_narratives: int = 0
    stale_narratives: int = 0
    on_track_commitments: int = 0
    at_risk_commitments: int = 0
    blocked_commitments: int = 0
    total_commitments: int = 0
    completed_tasks: int = 0
    blocked_tasks: int = 0
    overdue_tasks: int = 0
    orphan_tasks: int = 0
    total_tasks: int = 0

    @property
    def completion_percent(self) -> int:
        return compute_completion_percent(self.completed_tasks, self.total_tasks)


@dataclass(frozen=True)
class HealthReport:
    score: int
    status: HealthStatus
    issues: list[str] = field(default_factory=list)
    stats: HealthStats = field(default_factory=HealthStats)


def health_status_for(score: int) -> HealthStatus:
    """Bucket a 0-100 score: >= 80 healthy, >= 60 needs attention, else at risk."""
    if score >= 80:
        return HealthStatus.HEALTHY
    if score >= 60:
        return HealthStatus.NEEDS_ATTENTION
    return HealthStatus.AT_RISK


def is_stale(narrative: Narrative, now: datetime, stale_after_days: int) -> bool:
    """Active narrative untouched for more than stale_after_days whole days."""
    if narrative.status != NarrativeStatus.ACTIVE or narrative.updated_at is None:
        return False
    return (now - narrative.updated_at).days > stale_after_days


def _plural(count: int, singular: str, plural: str | None = None) -> str:
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural or singular + 's'}"


def _build_issues(stats: HealthStats) -> list[str]:
    # Fixed priority order; only non-zero counts produce an issue.
    candidates = [
        (stats.at_risk_narratives, _plural(stats.at_risk_narratives, "narrative") + " at risk"),
        (stats.at_risk_commitments, _plural(stats.at_risk_commitments, "commitment") + " at risk"),
        (stats.blocked_commitments, _plural(stats.blocked_commitments, "commitment") + " blocked by tasks"),
        (stats.blocked_tasks, _plural(stats.blocked_tasks, "task") + " blocked"),
        (stats.overdue_tasks, _plural(stats.overdue_tasks, "task") + " overdue"),
        (stats.stale_narratives, _plural(stats.stale_narratives, "narrative") + " with no recent updates"),
        (stats.orphan_tasks, _plural(stats.orphan_tasks, "task") + " without a commitment"),
    ]
    return [message for count, message in candidates if count > 0]


def compute_health(
    narratives: list[Narrative],
    commitments: list[Commitment],
    tasks: list[Task],
    now: datetime,
    stale_after_days: int = DEFAULT_STALE_AFTER_DAYS,
) -> HealthReport:
    """Compute workspace health from status distributions.

    Pure function -- no side effects, no DB access.

    Args:
        narratives: All workspace narratives
        commitments: All workspace commitments
        tasks: All workspace tasks
        now: Current time (injectable for testing)
        stale_after_days: Idle threshold for active narratives

    Returns:
        HealthReport with score, status bucket, issues and stats.

    Scoring:
        100 - 10 per at-risk narrative
            - 5 per at-risk or blocked commitment
            - 2 per blocked task
        clamped to [0, 100]. Stale, overdue and orphaned items are reported
        as issues but do not move the score.
    """
    commitment_ids = {c.id for c in commitments}
    commitments_with_blocked_tasks = {t.commitment_id for t in tasks if t.status == TaskStatus.BLOCKED}

    stats = HealthStats(
        active_narratives=sum(1 for n in narratives if n.status == NarrativeStatus.ACTIVE),
        total_narratives=len(narratives),
        at_risk_narratives=sum(1 for n in narratives if n.status == NarrativeStatus.AT_RISK),
        stale_narratives=sum(1 for n in narratives if is_stale(n, now, stale_after_days)),
        on_track_commitments=sum(1 for c in commitments if c.status in ON_TRACK_COMMITMENT_STATUSES),
        at_risk_commitments=sum(1 for c in commitments if c.status == CommitmentStatus.AT_RISK),
        blocked_commitments=sum(
            1
            for c in commitments
            if c.status not in SETTLED_COMMITMENT_STATUSES and c.id in commitments_with_blocked_tasks
        ),
        total_commitments=len(commitments),
        completed_tasks=sum(1 for t in tasks if t.status == TaskStatus.DONE),
        blocked_tasks=sum(1 for t in tasks if t.status == TaskStatus.BLOCKED),
        overdue_tasks=sum(1 for t in tasks if is_overdue(t, now)),
        orphan_tasks=sum(1 for t in tasks if t.commitment_id not in commitment_ids),
        total_tasks=len(tasks),
    )

    score = clamp_score(
        100
        - AT_RISK_NARRATIVE_PENALTY * stats.at_risk_narratives
        - AT_RISK_COMMITMENT_PENALTY * (stats.at_risk_commitments + stats.blocked_commitments)
        - BLOCKED_TASK_PENALTY * stats.blocked_tasks
    )

    return HealthReport(
        score=score,
        status=health_status_for(score),
        issues=_build_issues(stats),
        stats=stats,
    )
