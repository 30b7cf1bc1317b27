"""Pydantic schemas for workspace snapshots submitted to the scoring endpoints.

The persistence layer owns these records; the engine receives them as flat,
workspace-scoped collections. Every list defaults to empty.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from nct.domain.entities import (
    CommitmentStatus,
    CycleStatus,
    NarrativeStatus,
    PillarStatus,
    PlanningRhythm,
    TaskStatus,
)


class WorkspaceIn(BaseModel):
    id: str
    name: str
    planning_rhythm: PlanningRhythm = PlanningRhythm.QUARTERS
    cycle_length_weeks: int | None = Field(None, ge=1, description="Only used when planning_rhythm is cycles")
    vision: str | None = None


class YearIn(BaseModel):
    id: str
    year: int
    workspace_id: str | None = None


class CycleIn(BaseModel):
    id: str
    name: str
    start_date: datetime
    end_date: datetime
    status: CycleStatus = CycleStatus.PLANNING
    year_id: str | None = None
    workspace_id: str | None = None


class TeamIn(BaseModel):
    id: str
    name: str
    workspace_id: str | None = None


class KPIIn(BaseModel):
    id: str
    name: str
    target_value: str
    current_value: str | None = None
    unit: str | None = None


class PillarIn(BaseModel):
    id: str
    title: str
    status: PillarStatus = PillarStatus.ACTIVE
    year_id: str | None = None
    workspace_id: str | None = None
    kpis: list[KPIIn] = Field(default_factory=list)


class NarrativeIn(BaseModel):
    id: str
    title: str
    status: NarrativeStatus = NarrativeStatus.DRAFT
    team_id: str | None = None
    cycle_id: str | None = None
    pillar_id: str | None = None
    workspace_id: str | None = None
    updated_at: datetime | None = None


class CommitmentIn(BaseModel):
    id: str
    title: str
    narrative_id: str
    status: CommitmentStatus = CommitmentStatus.DRAFT
    due_date: datetime | None = None
    team_id: str | None = None
    workspace_id: str | None = None


class TaskIn(BaseModel):
    id: str
    title: str
    commitment_id: str
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None
    workspace_id: str | None = None


class WorkspaceSnapshot(BaseModel):
    """Flat collections for one workspace, as returned by the persistence layer."""

    workspace: WorkspaceIn
    years: list[YearIn] = Field(default_factory=list)
    cycles: list[CycleIn] = Field(default_factory=list)
    teams: list[TeamIn] = Field(default_factory=list)
    pillars: list[PillarIn] = Field(default_factory=list)
    narratives: list[NarrativeIn] = Field(default_factory=list)
    commitments: list[CommitmentIn] = Field(default_factory=list)
    tasks: list[TaskIn] = Field(default_factory=list)
    now: datetime | None = Field(None, description="Reference time; defaults to the server clock")
