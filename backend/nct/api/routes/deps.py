"""Shared route dependencies."""

from fastapi import HTTPException

from nct.core.exceptions import WorkspaceScopeError
from nct.services.scoring_service import ScoringService


def get_scoring_service() -> ScoringService:
    return ScoringService()


def scope_error_to_http(exc: WorkspaceScopeError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(exc))
