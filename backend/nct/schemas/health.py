"""Pydantic schemas for the workspace health endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from nct.domain.health import HealthStatus


class HealthStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    active_narratives: int
    total_narratives: int
    at_risk_narratives: int
    stale_narratives: int
    on_track_commitments: int
    at_risk_commitments: int
    blocked_commitments: int
    total_commitments: int
    completed_tasks: int
    blocked_tasks: int
    overdue_tasks: int
    orphan_tasks: int
    total_tasks: int
    completion_percent: int = Field(..., ge=0, le=100)


class HealthResponse(BaseModel):
    """Operational health score, bucket, plain-language issues and raw counts."""

    model_config = ConfigDict(from_attributes=True)

    score: int = Field(..., ge=0, le=100)
    status: HealthStatus
    issues: list[str] = Field(default_factory=list)
    stats: HealthStatsResponse
