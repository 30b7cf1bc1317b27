"""Dashboard health endpoint.

POST /api/dashboard/health - operational health score, issues and stats
"""

from fastapi import APIRouter, Depends

from nct.api.routes.deps import get_scoring_service, scope_error_to_http
from nct.core.exceptions import WorkspaceScopeError
from nct.schemas.health import HealthResponse
from nct.schemas.snapshot import WorkspaceSnapshot
from nct.services.scoring_service import ScoringService

router = APIRouter()


@router.post("/health", response_model=HealthResponse)
async def get_workspace_health(
    snapshot: WorkspaceSnapshot,
    service: ScoringService = Depends(get_scoring_service),
) -> HealthResponse:
    """Score narrative/commitment/task status distributions for the dashboard."""
    try:
        return service.get_health(snapshot)
    except WorkspaceScopeError as e:
        raise scope_error_to_http(e) from e
