"""Hierarchy aggregation: flat collections -> Year/Cycle/Team/Narrative/Commitment/Task tree.

Pure domain functions. Inputs are never mutated; child order always follows
input order so repeated calls produce identical trees.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TypeVar

from nct.domain.entities import (
    Commitment,
    CommitmentStatus,
    Cycle,
    CycleStatus,
    Narrative,
    NarrativeStatus,
    Task,
    TaskStatus,
    Team,
    Year,
    is_overdue,
)
from nct.domain.progress import compute_completion_percent
from nct.domain.time_window import TimeWindow, compute_cycle_window

T = TypeVar("T")

# Team view ordering: active work first, archived last.
NARRATIVE_STATUS_ORDER = {
    NarrativeStatus.ACTIVE: 0,
    NarrativeStatus.AT_RISK: 1,
    NarrativeStatus.DRAFT: 2,
    NarrativeStatus.COMPLETED: 3,
    NarrativeStatus.ARCHIVED: 4,
}


def group_by(items: Iterable[T], key: Callable[[T], str | None]) -> dict[str, list[T]]:
    """Group items by foreign key in one pass, preserving input order. None keys are skipped."""
    groups: dict[str, list[T]] = {}
    for item in items:
        k = key(item)
        if k is None:
            continue
        groups.setdefault(k, []).append(item)
    return groups


@dataclass(frozen=True)
class TaskNode:
    id: str
    title: str
    status: TaskStatus
    due_date: datetime | None = None


@dataclass(frozen=True)
class CommitmentNode:
    id: str
    title: str
    status: CommitmentStatus
    tasks: list[TaskNode] = field(default_factory=list)

    @property
    def task_count(self) -> int:
        return len(self.tasks)

    @property
    def tasks_done(self) -> int:
        return sum(1 for t in self.tasks if t.status == TaskStatus.DONE)

    @property
    def completion_percent(self) -> int:
        return compute_completion_percent(self.tasks_done, self.task_count)


@dataclass(frozen=True)
class NarrativeNode:
    id: str
    title: str
    status: NarrativeStatus
    team_id: str | None = None
    cycle_id: str | None = None
    pillar_id: str | None = None
    commitments: list[CommitmentNode] = field(default_factory=list)

    @property
    def commitment_count(self) -> int:
        return len(self.commitments)

    @property
    def task_count(self) -> int:
        return sum(c.task_count for c in self.commitments)

    @property
    def tasks_done(self) -> int:
        return sum(c.tasks_done for c in self.commitments)

    @property
    def completion_percent(self) -> int:
        return compute_completion_percent(self.tasks_done, self.task_count)


class _NarrativeRollup:
    """Counts summed over self.narratives."""

    narratives: list[NarrativeNode]

    @property
    def narrative_count(self) -> int:
        return len(self.narratives)

    @property
    def commitment_count(self) -> int:
        return sum(n.commitment_count for n in self.narratives)

    @property
    def task_count(self) -> int:
        return sum(n.task_count for n in self.narratives)

    @property
    def tasks_done(self) -> int:
        return sum(n.tasks_done for n in self.narratives)

    @property
    def completion_percent(self) -> int:
        return compute_completion_percent(self.tasks_done, self.task_count)


@dataclass(frozen=True)
class TeamNode(_NarrativeRollup):
    id: str
    name: str
    narratives: list[NarrativeNode] = field(default_factory=list)


@dataclass(frozen=True)
class CycleNode(_NarrativeRollup):
    """A cycle with its narratives split by team.

    unassigned_narratives holds narratives of this cycle whose team does not
    resolve. They still count toward the cycle's totals.
    """

    id: str
    name: str
    status: CycleStatus
    start_date: datetime
    end_date: datetime
    window: TimeWindow
    teams: list[TeamNode] = field(default_factory=list)
    unassigned_narratives: list[NarrativeNode] = field(default_factory=list)

    @property
    def narratives(self) -> list[NarrativeNode]:
        return [n for t in self.teams for n in t.narratives] + self.unassigned_narratives


@dataclass(frozen=True)
class YearNode:
    id: str
    year: int
    cycles: list[CycleNode] = field(default_factory=list)

    @property
    def narrative_count(self) -> int:
        return sum(c.narrative_count for c in self.cycles)

    @property
    def commitment_count(self) -> int:
        return sum(c.commitment_count for c in self.cycles)

    @property
    def task_count(self) -> int:
        return sum(c.task_count for c in self.cycles)

    @property
    def tasks_done(self) -> int:
        return sum(c.tasks_done for c in self.cycles)


@dataclass(frozen=True)
class WorkspaceTree:
    """Nested tree plus the narratives that could not be placed in it.

    without_team / without_cycle are computed independently, so a narrative with
    a team but no cycle shows up only in without_cycle. uncategorized is their
    union in input order.
    """

    years: list[YearNode]
    uncategorized: list[NarrativeNode]
    without_team: list[NarrativeNode]
    without_cycle: list[NarrativeNode]
    orphan_commitments: int = 0
    orphan_tasks: int = 0


class _Index:
    """Foreign-key indexes built once per aggregation pass."""

    def __init__(self, narratives: list[Narrative], commitments: list[Commitment], tasks: list[Task]):
        self.commitments_by_narrative = group_by(commitments, lambda c: c.narrative_id)
        self.tasks_by_commitment = group_by(tasks, lambda t: t.commitment_id)

        narrative_ids = {n.id for n in narratives}
        commitment_ids = {c.id for c in commitments}
        self.orphan_commitments = sum(1 for c in commitments if c.narrative_id not in narrative_ids)
        self.orphan_tasks = sum(1 for t in tasks if t.commitment_id not in commitment_ids)

    def build_narrative(self, narrative: Narrative) -> NarrativeNode:
        commitment_nodes = [
            CommitmentNode(
                id=c.id,
                title=c.title,
                status=c.status,
                tasks=[
                    TaskNode(id=t.id, title=t.title, status=t.status, due_date=t.due_date)
                    for t in self.tasks_by_commitment.get(c.id, [])
                ],
            )
            for c in self.commitments_by_narrative.get(narrative.id, [])
        ]
        return NarrativeNode(
            id=narrative.id,
            title=narrative.title,
            status=narrative.status,
            team_id=narrative.team_id,
            cycle_id=narrative.cycle_id,
            pillar_id=narrative.pillar_id,
            commitments=commitment_nodes,
        )


def build_hierarchy(
    years: list[Year],
    cycles: list[Cycle],
    teams: list[Team],
    narratives: list[Narrative],
    commitments: list[Commitment],
    tasks: list[Task],
    now: datetime,
) -> WorkspaceTree:
    """Roll flat collections into the nested strategy tree.

    Pure function -- linear in total entity count, never raises on dangling keys.

    Args:
        years, cycles, teams, narratives, commitments, tasks: Flat workspace collections
        now: Reference time for cycle progress windows

    Returns:
        WorkspaceTree. Years ascend by calendar year; cycles and teams keep input
        order and every team appears under every cycle. Commitments and tasks
        whose parent is missing are left out of the tree and only counted.
        Narratives whose team or cycle does not resolve land in the matching
        unassigned bucket. A narrative with a cycle but no team stays in its
        cycle under unassigned_narratives.
    """
    index = _Index(narratives, commitments, tasks)
    nodes = {n.id: index.build_narrative(n) for n in narratives}

    team_ids = {t.id for t in teams}
    cycle_ids = {c.id for c in cycles}

    without_team = [nodes[n.id] for n in narratives if n.team_id not in team_ids]
    without_cycle = [nodes[n.id] for n in narratives if n.cycle_id not in cycle_ids]
    uncategorized = [
        nodes[n.id] for n in narratives if n.team_id not in team_ids or n.cycle_id not in cycle_ids
    ]

    # Cycle grouping first; the team split inside a cycle is a separate step.
    by_cycle_team: dict[tuple[str, str], list[NarrativeNode]] = {}
    unassigned_by_cycle: dict[str, list[NarrativeNode]] = {}
    for n in narratives:
        if n.cycle_id not in cycle_ids:
            continue
        if n.team_id in team_ids:
            by_cycle_team.setdefault((n.cycle_id, n.team_id), []).append(nodes[n.id])
        else:
            unassigned_by_cycle.setdefault(n.cycle_id, []).append(nodes[n.id])

    cycles_by_year = group_by(cycles, lambda c: c.year_id)

    year_nodes = []
    for y in sorted(years, key=lambda y: y.year):
        cycle_nodes = [
            CycleNode(
                id=c.id,
                name=c.name,
                status=c.status,
                start_date=c.start_date,
                end_date=c.end_date,
                window=compute_cycle_window(c, now),
                teams=[
                    TeamNode(id=t.id, name=t.name, narratives=by_cycle_team.get((c.id, t.id), []))
                    for t in teams
                ],
                unassigned_narratives=unassigned_by_cycle.get(c.id, []),
            )
            for c in cycles_by_year.get(y.id, [])
        ]
        year_nodes.append(YearNode(id=y.id, year=y.year, cycles=cycle_nodes))

    return WorkspaceTree(
        years=year_nodes,
        uncategorized=uncategorized,
        without_team=without_team,
        without_cycle=without_cycle,
        orphan_commitments=index.orphan_commitments,
        orphan_tasks=index.orphan_tasks,
    )


@dataclass(frozen=True)
class TeamStats:
    total_narratives: int = 0
    active_narratives: int = 0
    draft_narratives: int = 0
    at_risk_narratives: int = 0
    completed_narratives: int = 0
    total_commitments: int = 0
    active_commitments: int = 0
    at_risk_commitments: int = 0
    completed_commitments: int = 0
    total_tasks: int = 0
    completed_tasks: int = 0
    in_progress_tasks: int = 0
    overdue_tasks: int = 0
    blocked_tasks: int = 0


@dataclass(frozen=True)
class TeamSummary:
    team: Team
    stats: TeamStats
    narratives: list[NarrativeNode]


def summarize_team(
    team: Team,
    narratives: list[Narrative],
    commitments: list[Commitment],
    tasks: list[Task],
    now: datetime,
) -> TeamSummary:
    """Status counts and per-narrative rollups for a single team.

    Only the team's narratives and their descendants are counted. Narratives are
    ordered active, at_risk, draft, completed, archived (stable within a status).
    """
    team_narratives = [n for n in narratives if n.team_id == team.id]
    narrative_ids = {n.id for n in team_narratives}
    team_commitments = [c for c in commitments if c.narrative_id in narrative_ids]
    commitment_ids = {c.id for c in team_commitments}
    team_tasks = [t for t in tasks if t.commitment_id in commitment_ids]

    def count(items, status) -> int:
        return sum(1 for i in items if i.status == status)

    stats = TeamStats(
        total_narratives=len(team_narratives),
        active_narratives=count(team_narratives, NarrativeStatus.ACTIVE),
        draft_narratives=count(team_narratives, NarrativeStatus.DRAFT),
        at_risk_narratives=count(team_narratives, NarrativeStatus.AT_RISK),
        completed_narratives=count(team_narratives, NarrativeStatus.COMPLETED),
        total_commitments=len(team_commitments),
        active_commitments=count(team_commitments, CommitmentStatus.ACTIVE),
        at_risk_commitments=count(team_commitments, CommitmentStatus.AT_RISK),
        completed_commitments=count(team_commitments, CommitmentStatus.COMPLETED),
        total_tasks=len(team_tasks),
        completed_tasks=count(team_tasks, TaskStatus.DONE),
        in_progress_tasks=count(team_tasks, TaskStatus.IN_PROGRESS),
        overdue_tasks=sum(1 for t in team_tasks if is_overdue(t, now)),
        blocked_tasks=count(team_tasks, TaskStatus.BLOCKED),
    )

    index = _Index(team_narratives, team_commitments, team_tasks)
    nodes = sorted(
        (index.build_narrative(n) for n in team_narratives),
        key=lambda node: NARRATIVE_STATUS_ORDER[node.status],
    )
    return TeamSummary(team=team, stats=stats, narratives=nodes)
