"""Strategy hierarchy entities as seen by the scoring engine.

Read-only value objects. The CRUD layer owns and mutates the real records;
the engine only ever receives frozen snapshots of them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class PlanningRhythm(StrEnum):
    """How a workspace slices its year into cycles."""

    QUARTERS = "quarters"
    CYCLES = "cycles"
    CUSTOM = "custom"


class CycleStatus(StrEnum):
    PLANNING = "planning"
    ACTIVE = "active"
    REVIEW = "review"
    ARCHIVED = "archived"


class PillarStatus(StrEnum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class NarrativeStatus(StrEnum):
    DRAFT = "draft"
    ACTIVE = "active"
    AT_RISK = "at_risk"
    COMPLETED = "completed"
    ARCHIVED = "archived"


# Commitments share the narrative lifecycle.
CommitmentStatus = NarrativeStatus


class TaskStatus(StrEnum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class Workspace:
    id: str
    name: str
    planning_rhythm: PlanningRhythm = PlanningRhythm.QUARTERS
    cycle_length_weeks: int | None = None
    vision: str | None = None


@dataclass(frozen=True)
class Year:
    id: str
    year: int
    workspace_id: str | None = None


@dataclass(frozen=True)
class Cycle:
    id: str
    name: str
    start_date: datetime
    end_date: datetime
    status: CycleStatus = CycleStatus.PLANNING
    year_id: str | None = None
    workspace_id: str | None = None


@dataclass(frozen=True)
class Team:
    id: str
    name: str
    workspace_id: str | None = None


@dataclass(frozen=True)
class KPI:
    id: str
    name: str
    target_value: str
    current_value: str | None = None
    unit: str | None = None


@dataclass(frozen=True)
class StrategicPillar:
    id: str
    title: str
    status: PillarStatus = PillarStatus.ACTIVE
    year_id: str | None = None
    workspace_id: str | None = None
    kpis: tuple[KPI, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Narrative:
    """Top-level strategic story. Team, cycle and pillar links are all optional."""

    id: str
    title: str
    status: NarrativeStatus = NarrativeStatus.DRAFT
    team_id: str | None = None
    cycle_id: str | None = None
    pillar_id: str | None = None
    workspace_id: str | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Commitment:
    id: str
    title: str
    narrative_id: str
    status: CommitmentStatus = CommitmentStatus.DRAFT
    due_date: datetime | None = None
    team_id: str | None = None
    workspace_id: str | None = None


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    commitment_id: str
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None
    workspace_id: str | None = None


def is_overdue(task: Task, now: datetime) -> bool:
    """A task is overdue when its due date has passed and it is not done."""
    if task.due_date is None or task.status == TaskStatus.DONE:
        return False
    return task.due_date < now
