"""Tests for structural gap detection.

Covers each rule in isolation, emission order, and the no-active-cycle case.
"""
from dataclasses import replace

import pytest

from nct.domain.entities import Commitment, CycleStatus, Narrative, PillarStatus, StrategicPillar, Team
from nct.domain.gaps import GapType, Severity, detect_gaps

pytestmark = pytest.mark.unit


def _detect(ws, **overrides):
    inputs = {
        "pillars": ws.pillars,
        "narratives": ws.narratives,
        "commitments": ws.commitments,
        "tasks": ws.tasks,
        "teams": ws.teams,
        "cycles": ws.cycles,
    }
    inputs.update(overrides)
    return detect_gaps(**inputs)


def test_aligned_workspace_has_no_gaps(aligned):
    assert _detect(aligned) == []


def test_empty_workspace_has_no_gaps():
    assert detect_gaps([], [], [], [], [], []) == []


def test_pillar_without_narratives_is_critical(aligned):
    lonely = StrategicPillar(id="p-cost", title="Cost discipline")
    gaps = _detect(aligned, pillars=aligned.pillars + [lonely])

    assert len(gaps) == 1
    gap = gaps[0]
    assert gap.severity == Severity.CRITICAL
    assert gap.type == GapType.PILLAR_NO_NARRATIVES
    assert gap.entity_id == "p-cost"
    assert gap.message == 'Pillar "Cost discipline" has no linked narratives'
    assert gap.action.label == "Create Narrative"
    assert gap.action.href == "/dashboard/narratives/new?pillarId=p-cost"


def test_archived_pillar_is_ignored(aligned):
    archived = StrategicPillar(id="p-old", title="Old bet", status=PillarStatus.ARCHIVED)
    assert _detect(aligned, pillars=aligned.pillars + [archived]) == []


def test_team_without_narrative_in_active_cycle(aligned):
    gaps = _detect(aligned, teams=aligned.teams + [Team(id="t-data", name="Data")])

    assert [(g.type, g.entity_id) for g in gaps] == [(GapType.TEAM_NO_NARRATIVES, "t-data")]
    assert gaps[0].message == "Data team has no narratives this cycle"
    assert gaps[0].action.href == "/dashboard/narratives/new?teamId=t-data&cycleId=c-q2"


def test_team_with_narrative_only_in_other_cycle_is_flagged(aligned):
    moved = replace(aligned.narratives[1], cycle_id="c-q1")
    gaps = _detect(aligned, narratives=[aligned.narratives[0], moved])
    assert [(g.type, g.entity_id) for g in gaps] == [(GapType.TEAM_NO_NARRATIVES, "t-growth")]


def test_no_active_cycle_skips_team_rule(aligned):
    planning = [replace(c, status=CycleStatus.PLANNING) for c in aligned.cycles]
    gaps = _detect(aligned, cycles=planning, teams=aligned.teams + [Team(id="t-data", name="Data")])
    assert gaps == []


def test_narrative_without_commitments_is_warning(aligned):
    bare = Narrative(id="n-bare", title="Bare idea", team_id="t-platform", cycle_id="c-q2", pillar_id="p-rel")
    gaps = _detect(aligned, narratives=aligned.narratives + [bare])

    assert len(gaps) == 1
    assert gaps[0].severity == Severity.WARNING
    assert gaps[0].type == GapType.NARRATIVE_NO_COMMITMENTS
    assert gaps[0].action.href == "/dashboard/narratives/n-bare"


def test_commitment_without_tasks_is_warning(aligned):
    empty = Commitment(id="m-empty", title="Empty promise", narrative_id="n-uptime")
    gaps = _detect(aligned, commitments=aligned.commitments + [empty])

    assert len(gaps) == 1
    assert gaps[0].type == GapType.COMMITMENT_NO_TASKS
    assert gaps[0].message == 'Commitment "Empty promise" has no tasks'
    assert gaps[0].action.label == "Add Task"
    assert gaps[0].action.href == "/dashboard/commitments/m-empty"


def test_narrative_without_pillar_is_info(aligned):
    unlinked = replace(aligned.narratives[0], pillar_id=None)
    gaps = _detect(aligned, narratives=[unlinked, aligned.narratives[1]])

    assert len(gaps) == 1
    assert gaps[0].severity == Severity.INFO
    assert gaps[0].type == GapType.NARRATIVE_NO_PILLAR
    assert gaps[0].entity_id == "n-uptime"


def test_emission_follows_rule_order(aligned):
    bare = Narrative(id="n-bare", title="Bare idea")
    empty = Commitment(id="m-empty", title="Empty promise", narrative_id="n-uptime")
    gaps = _detect(
        aligned,
        pillars=aligned.pillars + [StrategicPillar(id="p-cost", title="Cost")],
        teams=aligned.teams + [Team(id="t-data", name="Data")],
        narratives=aligned.narratives + [bare],
        commitments=aligned.commitments + [empty],
    )
    assert [g.type for g in gaps] == [
        GapType.PILLAR_NO_NARRATIVES,
        GapType.TEAM_NO_NARRATIVES,
        GapType.NARRATIVE_NO_COMMITMENTS,
        GapType.COMMITMENT_NO_TASKS,
        GapType.NARRATIVE_NO_PILLAR,
    ]


def test_detection_is_deterministic(aligned):
    teams = aligned.teams + [Team(id="t-data", name="Data"), Team(id="t-ml", name="ML")]
    assert _detect(aligned, teams=teams) == _detect(aligned, teams=teams)
