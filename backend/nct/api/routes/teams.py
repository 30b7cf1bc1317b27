"""Team dashboard endpoint.

POST /api/teams/{team_id}/dashboard - status counts and narrative rollups for one team
"""

from fastapi import APIRouter, Depends, HTTPException

from nct.api.routes.deps import get_scoring_service, scope_error_to_http
from nct.core.exceptions import UnknownTeamError, WorkspaceScopeError
from nct.schemas.snapshot import WorkspaceSnapshot
from nct.schemas.teams import TeamDashboardResponse
from nct.services.scoring_service import ScoringService

router = APIRouter()


@router.post("/{team_id}/dashboard", response_model=TeamDashboardResponse)
async def get_team_dashboard(
    team_id: str,
    snapshot: WorkspaceSnapshot,
    service: ScoringService = Depends(get_scoring_service),
) -> TeamDashboardResponse:
    try:
        return service.get_team_dashboard(snapshot, team_id)
    except UnknownTeamError as e:
        raise HTTPException(status_code=404, detail="Team not found") from e
    except WorkspaceScopeError as e:
        raise scope_error_to_http(e) from e
