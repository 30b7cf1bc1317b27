class NCTError(Exception):
    """Base exception for the alignment engine."""

    pass


class WorkspaceScopeError(NCTError):
    """Raised when a submitted entity belongs to a different workspace than the snapshot."""

    def __init__(self, entity_type: str, entity_id: str, workspace_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.workspace_id = workspace_id
        super().__init__(f"{entity_type} '{entity_id}' is not in workspace '{workspace_id}'")


class UnknownTeamError(NCTError):
    """Raised when a team view is requested for a team missing from the snapshot."""

    def __init__(self, team_id: str):
        self.team_id = team_id
        super().__init__(f"Team '{team_id}' not found")
