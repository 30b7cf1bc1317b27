"""ScoringService: maps workspace snapshots onto the pure scoring engine.

Orchestrates domain functions and shapes their results into API responses.
No business rules live here (those are in the domain layer); this layer
converts inputs, enforces the workspace scope and logs one event per call.
"""

from datetime import datetime, timezone

import structlog

from nct.core.config import Settings, get_settings
from nct.core.exceptions import UnknownTeamError, WorkspaceScopeError
from nct.domain.alignment import compute_alignment_score
from nct.domain.cycle_defaults import suggest_cycle_defaults
from nct.domain.entities import (
    KPI,
    Commitment,
    Cycle,
    Narrative,
    StrategicPillar,
    Task,
    Team,
    Workspace,
    Year,
)
from nct.domain.gaps import Severity, detect_gaps
from nct.domain.health import compute_health
from nct.domain.hierarchy import build_hierarchy, summarize_team
from nct.domain.time_window import as_utc_datetime
from nct.schemas.alignment import AlignmentResponse, GapResponse
from nct.schemas.cycles import CycleDefaultsResponse
from nct.schemas.health import HealthResponse
from nct.schemas.snapshot import WorkspaceSnapshot
from nct.schemas.teams import TeamDashboardResponse
from nct.schemas.tree import (
    NarrativeNodeResponse,
    TreeResponse,
    WorkspaceRef,
    YearNodeResponse,
)

logger = structlog.get_logger(__name__)


def _optional_utc(value: datetime | None) -> datetime | None:
    return as_utc_datetime(value) if value is not None else None


class WorkspaceData:
    """Domain entities decoded from a snapshot, all datetimes UTC-aware."""

    def __init__(self, snapshot: WorkspaceSnapshot):
        ws = snapshot.workspace
        self.workspace = Workspace(
            id=ws.id,
            name=ws.name,
            planning_rhythm=ws.planning_rhythm,
            cycle_length_weeks=ws.cycle_length_weeks,
            vision=ws.vision,
        )
        self.years = [Year(id=y.id, year=y.year, workspace_id=y.workspace_id) for y in snapshot.years]
        self.cycles = [
            Cycle(
                id=c.id,
                name=c.name,
                start_date=as_utc_datetime(c.start_date),
                end_date=as_utc_datetime(c.end_date),
                status=c.status,
                year_id=c.year_id,
                workspace_id=c.workspace_id,
            )
            for c in snapshot.cycles
        ]
        self.teams = [Team(id=t.id, name=t.name, workspace_id=t.workspace_id) for t in snapshot.teams]
        self.pillars = [
            StrategicPillar(
                id=p.id,
                title=p.title,
                status=p.status,
                year_id=p.year_id,
                workspace_id=p.workspace_id,
                kpis=tuple(
                    KPI(id=k.id, name=k.name, target_value=k.target_value,
                        current_value=k.current_value, unit=k.unit)
                    for k in p.kpis
                ),
            )
            for p in snapshot.pillars
        ]
        self.narratives = [
            Narrative(
                id=n.id,
                title=n.title,
                status=n.status,
                team_id=n.team_id,
                cycle_id=n.cycle_id,
                pillar_id=n.pillar_id,
                workspace_id=n.workspace_id,
                updated_at=_optional_utc(n.updated_at),
            )
            for n in snapshot.narratives
        ]
        self.commitments = [
            Commitment(
                id=c.id,
                title=c.title,
                narrative_id=c.narrative_id,
                status=c.status,
                due_date=_optional_utc(c.due_date),
                team_id=c.team_id,
                workspace_id=c.workspace_id,
            )
            for c in snapshot.commitments
        ]
        self.tasks = [
            Task(
                id=t.id,
                title=t.title,
                commitment_id=t.commitment_id,
                status=t.status,
                due_date=_optional_utc(t.due_date),
                workspace_id=t.workspace_id,
            )
            for t in snapshot.tasks
        ]
        self.now = as_utc_datetime(snapshot.now) if snapshot.now else datetime.now(timezone.utc)

    def check_scope(self) -> None:
        """Raise WorkspaceScopeError if any entity names a different workspace."""
        collections = (
            ("year", self.years),
            ("cycle", self.cycles),
            ("team", self.teams),
            ("pillar", self.pillars),
            ("narrative", self.narratives),
            ("commitment", self.commitments),
            ("task", self.tasks),
        )
        for entity_type, items in collections:
            for item in items:
                if item.workspace_id is not None and item.workspace_id != self.workspace.id:
                    raise WorkspaceScopeError(entity_type, item.id, self.workspace.id)


class ScoringService:
    """Service layer for alignment, health, tree, cycle and team views.

    Every method is a fresh read-compute-return over the given snapshot.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def _load(self, snapshot: WorkspaceSnapshot) -> WorkspaceData:
        data = WorkspaceData(snapshot)
        data.check_scope()
        return data

    def get_alignment(self, snapshot: WorkspaceSnapshot) -> AlignmentResponse:
        """Detect structural gaps and score them."""
        data = self._load(snapshot)
        gaps = detect_gaps(
            pillars=data.pillars,
            narratives=data.narratives,
            commitments=data.commitments,
            tasks=data.tasks,
            teams=data.teams,
            cycles=data.cycles,
        )
        score = compute_alignment_score(gaps)

        logger.info(
            "alignment_computed",
            workspace_id=data.workspace.id,
            score=score,
            gap_count=len(gaps),
            critical=sum(1 for g in gaps if g.severity == Severity.CRITICAL),
        )
        return AlignmentResponse(
            gaps=[GapResponse.model_validate(g) for g in gaps],
            score=score,
        )

    def get_health(self, snapshot: WorkspaceSnapshot) -> HealthResponse:
        """Score current operational state of the workspace."""
        data = self._load(snapshot)
        report = compute_health(
            narratives=data.narratives,
            commitments=data.commitments,
            tasks=data.tasks,
            now=data.now,
            stale_after_days=self.settings.stale_narrative_days,
        )

        logger.info(
            "health_computed",
            workspace_id=data.workspace.id,
            score=report.score,
            status=report.status.value,
            issue_count=len(report.issues),
        )
        return HealthResponse.model_validate(report)

    def get_tree(self, snapshot: WorkspaceSnapshot) -> TreeResponse:
        """Build the nested strategy tree."""
        data = self._load(snapshot)
        tree = build_hierarchy(
            years=data.years,
            cycles=data.cycles,
            teams=data.teams,
            narratives=data.narratives,
            commitments=data.commitments,
            tasks=data.tasks,
            now=data.now,
        )

        if tree.orphan_commitments or tree.orphan_tasks:
            logger.warning(
                "tree_orphans_excluded",
                workspace_id=data.workspace.id,
                orphan_commitments=tree.orphan_commitments,
                orphan_tasks=tree.orphan_tasks,
            )
        logger.info(
            "tree_built",
            workspace_id=data.workspace.id,
            years=len(tree.years),
            uncategorized=len(tree.uncategorized),
        )

        return TreeResponse(
            workspace=WorkspaceRef(id=data.workspace.id, name=data.workspace.name),
            strategy=data.workspace.vision,
            years=[YearNodeResponse.model_validate(y) for y in tree.years],
            uncategorized=[NarrativeNodeResponse.model_validate(n) for n in tree.uncategorized],
            without_team=[NarrativeNodeResponse.model_validate(n) for n in tree.without_team],
            without_cycle=[NarrativeNodeResponse.model_validate(n) for n in tree.without_cycle],
            orphan_commitments=tree.orphan_commitments,
            orphan_tasks=tree.orphan_tasks,
        )

    def get_cycle_defaults(self, snapshot: WorkspaceSnapshot) -> CycleDefaultsResponse:
        """Suggest the next cycle for the workspace's planning rhythm."""
        data = self._load(snapshot)
        defaults = suggest_cycle_defaults(
            rhythm=data.workspace.planning_rhythm,
            cycle_length_weeks=data.workspace.cycle_length_weeks,
            existing_cycles=data.cycles,
            now=data.now,
            custom_length_days=self.settings.custom_cycle_length_days,
        )

        logger.info(
            "cycle_defaults_suggested",
            workspace_id=data.workspace.id,
            rhythm=data.workspace.planning_rhythm.value,
            name=defaults.name,
            exhausted=defaults.start_date is None,
        )
        return CycleDefaultsResponse(
            name=defaults.name,
            start_date=defaults.start_date.isoformat() if defaults.start_date else "",
            end_date=defaults.end_date.isoformat() if defaults.end_date else "",
        )

    def get_team_dashboard(self, snapshot: WorkspaceSnapshot, team_id: str) -> TeamDashboardResponse:
        """Roll up one team's narratives, commitments and tasks.

        Raises:
            UnknownTeamError: team_id is not in the snapshot
        """
        data = self._load(snapshot)
        team = next((t for t in data.teams if t.id == team_id), None)
        if team is None:
            raise UnknownTeamError(team_id)

        summary = summarize_team(
            team=team,
            narratives=data.narratives,
            commitments=data.commitments,
            tasks=data.tasks,
            now=data.now,
        )

        logger.info(
            "team_dashboard_built",
            workspace_id=data.workspace.id,
            team_id=team.id,
            narratives=summary.stats.total_narratives,
        )
        return TeamDashboardResponse.model_validate(summary)
