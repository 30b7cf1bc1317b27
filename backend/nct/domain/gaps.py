"""Structural gap detection between strategy and execution.

Pure domain function. Each rule is an existence check over the relationship
graph; findings are emitted in rule order, then input order within a rule.
"""

from dataclasses import dataclass
from enum import StrEnum

from nct.domain.entities import (
    Commitment,
    Cycle,
    CycleStatus,
    Narrative,
    PillarStatus,
    StrategicPillar,
    Task,
    Team,
)


class Severity(StrEnum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class GapType(StrEnum):
    PILLAR_NO_NARRATIVES = "pillar_no_narratives"
    TEAM_NO_NARRATIVES = "team_no_narratives"
    NARRATIVE_NO_COMMITMENTS = "narrative_no_commitments"
    COMMITMENT_NO_TASKS = "commitment_no_tasks"
    NARRATIVE_NO_PILLAR = "narrative_no_pillar"


@dataclass(frozen=True)
class GapAction:
    """Remediation link, passed through to the UI untouched."""

    label: str
    href: str


@dataclass(frozen=True)
class Gap:
    severity: Severity
    type: GapType
    message: str
    action: GapAction
    entity_id: str


def detect_gaps(
    pillars: list[StrategicPillar],
    narratives: list[Narrative],
    commitments: list[Commitment],
    tasks: list[Task],
    teams: list[Team],
    cycles: list[Cycle],
) -> list[Gap]:
    """Scan the workspace for structural completeness gaps.

    Pure function -- no side effects, no DB access.

    Rules (emission order):
        - pillar_no_narratives (critical): active pillar with no narrative
        - team_no_narratives (critical): team with no narrative in the active cycle;
          skipped entirely when no cycle is active
        - narrative_no_commitments (warning): narrative with no commitment
        - commitment_no_tasks (warning): commitment with no task
        - narrative_no_pillar (info): narrative without a pillar link

    Archived pillars are ignored even if the caller passes them.
    """
    linked_pillar_ids = {n.pillar_id for n in narratives if n.pillar_id is not None}
    narrative_ids_with_commitments = {c.narrative_id for c in commitments}
    commitment_ids_with_tasks = {t.commitment_id for t in tasks}

    gaps: list[Gap] = []

    for pillar in pillars:
        if pillar.status != PillarStatus.ACTIVE or pillar.id in linked_pillar_ids:
            continue
        gaps.append(Gap(
            severity=Severity.CRITICAL,
            type=GapType.PILLAR_NO_NARRATIVES,
            message=f'Pillar "{pillar.title}" has no linked narratives',
            action=GapAction("Create Narrative", f"/dashboard/narratives/new?pillarId={pillar.id}"),
            entity_id=pillar.id,
        ))

    active_cycle = next((c for c in cycles if c.status == CycleStatus.ACTIVE), None)
    if active_cycle is not None:
        teams_in_cycle = {n.team_id for n in narratives if n.cycle_id == active_cycle.id}
        for team in teams:
            if team.id in teams_in_cycle:
                continue
            gaps.append(Gap(
                severity=Severity.CRITICAL,
                type=GapType.TEAM_NO_NARRATIVES,
                message=f"{team.name} team has no narratives this cycle",
                action=GapAction(
                    "Create Narrative",
                    f"/dashboard/narratives/new?teamId={team.id}&cycleId={active_cycle.id}",
                ),
                entity_id=team.id,
            ))

    for narrative in narratives:
        if narrative.id in narrative_ids_with_commitments:
            continue
        gaps.append(Gap(
            severity=Severity.WARNING,
            type=GapType.NARRATIVE_NO_COMMITMENTS,
            message=f'Narrative "{narrative.title}" has no commitments',
            action=GapAction("Add Commitment", f"/dashboard/narratives/{narrative.id}"),
            entity_id=narrative.id,
        ))

    for commitment in commitments:
        if commitment.id in commitment_ids_with_tasks:
            continue
        gaps.append(Gap(
            severity=Severity.WARNING,
            type=GapType.COMMITMENT_NO_TASKS,
            message=f'Commitment "{commitment.title}" has no tasks',
            action=GapAction("Add Task", f"/dashboard/commitments/{commitment.id}"),
            entity_id=commitment.id,
        ))

    for narrative in narratives:
        if narrative.pillar_id:
            continue
        gaps.append(Gap(
            severity=Severity.INFO,
            type=GapType.NARRATIVE_NO_PILLAR,
            message=f'Narrative "{narrative.title}" is not linked to a pillar',
            action=GapAction("Link to Pillar", f"/dashboard/narratives/{narrative.id}"),
            entity_id=narrative.id,
        ))

    return gaps
