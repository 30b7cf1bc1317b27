"""Shared test fixtures for all test groups."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from nct.domain.entities import (
    Commitment,
    CommitmentStatus,
    Cycle,
    CycleStatus,
    Narrative,
    NarrativeStatus,
    PillarStatus,
    StrategicPillar,
    Task,
    TaskStatus,
    Team,
    Year,
)

NOW = datetime(2025, 5, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed reference time inside Q2 2025."""
    return NOW


@pytest.fixture
def aligned():
    """A workspace with zero alignment gaps.

    One active pillar, one active cycle (Q2 2025) with both teams represented,
    every narrative linked to the pillar with a commitment, every commitment with a task.
    """
    year = Year(id="y2025", year=2025, workspace_id="ws1")
    cycle = Cycle(
        id="c-q2",
        name="Q2 2025",
        start_date=datetime(2025, 4, 1, tzinfo=timezone.utc),
        end_date=datetime(2025, 6, 30, tzinfo=timezone.utc),
        status=CycleStatus.ACTIVE,
        year_id="y2025",
        workspace_id="ws1",
    )
    teams = [Team(id="t-platform", name="Platform"), Team(id="t-growth", name="Growth")]
    pillar = StrategicPillar(id="p-rel", title="Reliability", status=PillarStatus.ACTIVE, year_id="y2025")
    narratives = [
        Narrative(
            id="n-uptime",
            title="Four nines uptime",
            status=NarrativeStatus.ACTIVE,
            team_id="t-platform",
            cycle_id="c-q2",
            pillar_id="p-rel",
            updated_at=datetime(2025, 5, 10, tzinfo=timezone.utc),
        ),
        Narrative(
            id="n-onboarding",
            title="Faster onboarding",
            status=NarrativeStatus.ACTIVE,
            team_id="t-growth",
            cycle_id="c-q2",
            pillar_id="p-rel",
            updated_at=datetime(2025, 5, 12, tzinfo=timezone.utc),
        ),
    ]
    commitments = [
        Commitment(id="m-failover", title="Automated failover", narrative_id="n-uptime",
                   status=CommitmentStatus.ACTIVE),
        Commitment(id="m-signup", title="One-page signup", narrative_id="n-onboarding",
                   status=CommitmentStatus.ACTIVE),
    ]
    tasks = [
        Task(id="k-drill", title="Run failover drill", commitment_id="m-failover", status=TaskStatus.DONE),
        Task(id="k-form", title="Ship new form", commitment_id="m-signup", status=TaskStatus.IN_PROGRESS),
    ]
    return SimpleNamespace(
        years=[year],
        cycles=[cycle],
        teams=teams,
        pillars=[pillar],
        narratives=narratives,
        commitments=commitments,
        tasks=tasks,
    )


@pytest.fixture
def snapshot_payload():
    """JSON body for the scoring endpoints matching the aligned workspace."""
    return {
        "workspace": {
            "id": "ws1",
            "name": "Acme",
            "planning_rhythm": "quarters",
            "vision": "Be the most reliable platform",
        },
        "years": [{"id": "y2025", "year": 2025, "workspace_id": "ws1"}],
        "cycles": [
            {
                "id": "c-q2",
                "name": "Q2 2025",
                "start_date": "2025-04-01T00:00:00Z",
                "end_date": "2025-06-30T00:00:00Z",
                "status": "active",
                "year_id": "y2025",
                "workspace_id": "ws1",
            }
        ],
        "teams": [
            {"id": "t-platform", "name": "Platform", "workspace_id": "ws1"},
            {"id": "t-growth", "name": "Growth", "workspace_id": "ws1"},
        ],
        "pillars": [
            {
                "id": "p-rel",
                "title": "Reliability",
                "status": "active",
                "year_id": "y2025",
                "kpis": [{"id": "kpi-1", "name": "Uptime", "target_value": "99.99", "unit": "%"}],
            }
        ],
        "narratives": [
            {
                "id": "n-uptime",
                "title": "Four nines uptime",
                "status": "active",
                "team_id": "t-platform",
                "cycle_id": "c-q2",
                "pillar_id": "p-rel",
                "updated_at": "2025-05-10T00:00:00Z",
            },
            {
                "id": "n-onboarding",
                "title": "Faster onboarding",
                "status": "active",
                "team_id": "t-growth",
                "cycle_id": "c-q2",
                "pillar_id": "p-rel",
                "updated_at": "2025-05-12T00:00:00Z",
            },
        ],
        "commitments": [
            {"id": "m-failover", "title": "Automated failover", "narrative_id": "n-uptime", "status": "active"},
            {"id": "m-signup", "title": "One-page signup", "narrative_id": "n-onboarding", "status": "active"},
        ],
        "tasks": [
            {"id": "k-drill", "title": "Run failover drill", "commitment_id": "m-failover", "status": "done"},
            {"id": "k-form", "title": "Ship new form", "commitment_id": "m-signup", "status": "in_progress"},
        ],
        "now": "2025-05-15T12:00:00Z",
    }
