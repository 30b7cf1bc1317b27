"""Strategy tree endpoint.

POST /api/nct-tree - nested Year/Cycle/Team/Narrative/Commitment/Task tree
"""

from fastapi import APIRouter, Depends

from nct.api.routes.deps import get_scoring_service, scope_error_to_http
from nct.core.exceptions import WorkspaceScopeError
from nct.schemas.snapshot import WorkspaceSnapshot
from nct.schemas.tree import TreeResponse
from nct.services.scoring_service import ScoringService

router = APIRouter()


@router.post("", response_model=TreeResponse)
async def get_tree(
    snapshot: WorkspaceSnapshot,
    service: ScoringService = Depends(get_scoring_service),
) -> TreeResponse:
    try:
        return service.get_tree(snapshot)
    except WorkspaceScopeError as e:
        raise scope_error_to_http(e) from e
