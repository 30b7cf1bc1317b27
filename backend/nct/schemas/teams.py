"""Pydantic schemas for the team dashboard."""

from pydantic import BaseModel, ConfigDict, Field

from nct.domain.entities import NarrativeStatus


class TeamRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class TeamStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_narratives: int
    active_narratives: int
    draft_narratives: int
    at_risk_narratives: int
    completed_narratives: int
    total_commitments: int
    active_commitments: int
    at_risk_commitments: int
    completed_commitments: int
    total_tasks: int
    completed_tasks: int
    in_progress_tasks: int
    overdue_tasks: int
    blocked_tasks: int


class TeamNarrativeSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    status: NarrativeStatus
    cycle_id: str | None = None
    commitment_count: int
    task_count: int
    tasks_done: int


class TeamDashboardResponse(BaseModel):
    """Team view: status counts plus narratives ordered by status priority."""

    model_config = ConfigDict(from_attributes=True)

    team: TeamRef
    stats: TeamStatsResponse
    narratives: list[TeamNarrativeSummary] = Field(default_factory=list)
