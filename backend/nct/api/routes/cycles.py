"""Cycle suggestion endpoint.

POST /api/cycles/defaults - pre-filled values for the new-cycle form
"""

from fastapi import APIRouter, Depends

from nct.api.routes.deps import get_scoring_service, scope_error_to_http
from nct.core.exceptions import WorkspaceScopeError
from nct.schemas.cycles import CycleDefaultsResponse
from nct.schemas.snapshot import WorkspaceSnapshot
from nct.services.scoring_service import ScoringService

router = APIRouter()


@router.post("/defaults", response_model=CycleDefaultsResponse)
async def get_cycle_defaults(
    snapshot: WorkspaceSnapshot,
    service: ScoringService = Depends(get_scoring_service),
) -> CycleDefaultsResponse:
    """Suggest name/start/end for the next cycle from the workspace planning rhythm.

    Only workspace settings and existing cycles are read from the snapshot.
    """
    try:
        return service.get_cycle_defaults(snapshot)
    except WorkspaceScopeError as e:
        raise scope_error_to_http(e) from e
