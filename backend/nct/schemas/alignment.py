"""Pydantic schemas for the alignment endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from nct.domain.gaps import GapType, Severity


class GapActionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str
    href: str


class GapResponse(BaseModel):
    """A single structural gap between strategy and execution."""

    model_config = ConfigDict(from_attributes=True)

    severity: Severity
    type: GapType
    message: str = Field(..., description="Human-readable sentence naming the entity")
    action: GapActionResponse
    entity_id: str


class AlignmentResponse(BaseModel):
    """Alignment findings plus the 0-100 score derived from them.

    gaps defaults to an empty array, never null.
    """

    gaps: list[GapResponse] = Field(default_factory=list)
    score: int = Field(..., ge=0, le=100)
