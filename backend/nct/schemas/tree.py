"""Pydantic schemas for the strategy tree endpoint (navigation and list views)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from nct.domain.entities import CommitmentStatus, CycleStatus, NarrativeStatus, TaskStatus


class TimeWindowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    inside_window: bool
    elapsed_fraction: float = Field(..., ge=0, le=1)
    current_week: int = Field(..., ge=1)
    total_weeks: int = Field(..., ge=1)
    percent: int = Field(..., ge=0, le=100)


class TaskNodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    status: TaskStatus
    due_date: datetime | None = None


class CommitmentNodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    status: CommitmentStatus
    task_count: int
    tasks_done: int
    completion_percent: int
    tasks: list[TaskNodeResponse] = Field(default_factory=list)


class NarrativeNodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    status: NarrativeStatus
    team_id: str | None = None
    cycle_id: str | None = None
    pillar_id: str | None = None
    commitment_count: int
    task_count: int
    tasks_done: int
    completion_percent: int
    commitments: list[CommitmentNodeResponse] = Field(default_factory=list)


class TeamNodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    narrative_count: int
    commitment_count: int
    task_count: int
    tasks_done: int
    narratives: list[NarrativeNodeResponse] = Field(default_factory=list)


class CycleNodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    status: CycleStatus
    start_date: datetime
    end_date: datetime
    window: TimeWindowResponse = Field(..., description="Progress of this cycle at the request's reference time")
    narrative_count: int
    commitment_count: int
    task_count: int
    tasks_done: int
    completion_percent: int
    teams: list[TeamNodeResponse] = Field(default_factory=list)
    unassigned_narratives: list[NarrativeNodeResponse] = Field(default_factory=list)


class YearNodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    year: int
    narrative_count: int
    commitment_count: int
    task_count: int
    tasks_done: int
    cycles: list[CycleNodeResponse] = Field(default_factory=list)


class WorkspaceRef(BaseModel):
    id: str
    name: str


class TreeResponse(BaseModel):
    """Year -> Cycle -> Team -> Narrative -> Commitment -> Task tree.

    uncategorized holds narratives missing a team or a cycle; without_team and
    without_cycle split that set per grouping level. Orphan counts cover
    commitments and tasks whose parent was not in the snapshot.
    """

    workspace: WorkspaceRef
    strategy: str | None = None
    years: list[YearNodeResponse] = Field(default_factory=list)
    uncategorized: list[NarrativeNodeResponse] = Field(default_factory=list)
    without_team: list[NarrativeNodeResponse] = Field(default_factory=list)
    without_cycle: list[NarrativeNodeResponse] = Field(default_factory=list)
    orphan_commitments: int = 0
    orphan_tasks: int = 0
