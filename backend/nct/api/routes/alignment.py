"""Alignment endpoint.

POST /api/alignment - structural gaps and alignment score for a workspace snapshot
"""

from fastapi import APIRouter, Depends

from nct.api.routes.deps import get_scoring_service, scope_error_to_http
from nct.core.exceptions import WorkspaceScopeError
from nct.schemas.alignment import AlignmentResponse
from nct.schemas.snapshot import WorkspaceSnapshot
from nct.services.scoring_service import ScoringService

router = APIRouter()


@router.post("", response_model=AlignmentResponse)
async def get_alignment(
    snapshot: WorkspaceSnapshot,
    service: ScoringService = Depends(get_scoring_service),
) -> AlignmentResponse:
    """Return gaps between strategy and execution plus the 0-100 alignment score.

    Expects active pillars plus all narratives, commitments, tasks, teams and cycles.
    """
    try:
        return service.get_alignment(snapshot)
    except WorkspaceScopeError as e:
        raise scope_error_to_http(e) from e
