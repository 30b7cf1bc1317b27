"""Integration tests for the strategy tree endpoint."""

import pytest

pytestmark = pytest.mark.integration


def test_tree_payload(api_client, snapshot_payload):
    response = api_client.post("/api/nct-tree", json=snapshot_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["workspace"] == {"id": "ws1", "name": "Acme"}
    assert data["strategy"] == "Be the most reliable platform"
    cycle = data["years"][0]["cycles"][0]
    assert cycle["status"] == "active"
    assert cycle["window"]["inside_window"] is True
    assert [t["name"] for t in cycle["teams"]] == ["Platform", "Growth"]
    narrative = cycle["teams"][0]["narratives"][0]
    assert narrative["commitment_count"] == 1
    assert narrative["commitments"][0]["tasks"][0]["id"] == "k-drill"
    assert data["uncategorized"] == []


def test_uncategorized_and_orphans(api_client, snapshot_payload):
    snapshot_payload["narratives"].append({"id": "n-loose", "title": "Loose", "team_id": "t-platform"})
    snapshot_payload["tasks"].append({"id": "k-orphan", "title": "Lost", "commitment_id": "m-deleted"})

    data = api_client.post("/api/nct-tree", json=snapshot_payload).json()

    assert [n["id"] for n in data["uncategorized"]] == ["n-loose"]
    assert [n["id"] for n in data["without_cycle"]] == ["n-loose"]
    assert data["without_team"] == []
    assert data["orphan_tasks"] == 1


def test_cycle_counts_include_teamless_narratives(api_client, snapshot_payload):
    snapshot_payload["narratives"].append({"id": "n-no-team", "title": "No team", "cycle_id": "c-q2"})

    data = api_client.post("/api/nct-tree", json=snapshot_payload).json()

    year = data["years"][0]
    cycle = year["cycles"][0]
    assert [n["id"] for n in cycle["unassigned_narratives"]] == ["n-no-team"]
    assert cycle["narrative_count"] == 3
    assert cycle["commitment_count"] == 2
    assert year["commitment_count"] == 2
    assert [n["id"] for n in data["without_team"]] == ["n-no-team"]
