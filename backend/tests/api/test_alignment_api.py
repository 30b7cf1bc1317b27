"""Integration tests for the alignment endpoint.

Tests cover:
- POST /api/alignment returns {gaps, score}
- Gap payload carries severity, type, message, action and entity_id
- Empty collections are valid
- Unknown statuses are rejected by validation
"""

import pytest

pytestmark = pytest.mark.integration


def test_aligned_workspace_scores_100(api_client, snapshot_payload):
    response = api_client.post("/api/alignment", json=snapshot_payload)
    assert response.status_code == 200
    assert response.json() == {"gaps": [], "score": 100}


def test_single_critical_gap(api_client, snapshot_payload):
    snapshot_payload["pillars"].append({"id": "p-cost", "title": "Cost discipline", "status": "active"})

    data = api_client.post("/api/alignment", json=snapshot_payload).json()

    assert data["score"] == 90
    assert data["gaps"] == [
        {
            "severity": "critical",
            "type": "pillar_no_narratives",
            "message": 'Pillar "Cost discipline" has no linked narratives',
            "action": {"label": "Create Narrative", "href": "/dashboard/narratives/new?pillarId=p-cost"},
            "entity_id": "p-cost",
        }
    ]


def test_workspace_with_only_header_is_fully_aligned(api_client):
    response = api_client.post("/api/alignment", json={"workspace": {"id": "ws1", "name": "Empty"}})
    assert response.status_code == 200
    assert response.json() == {"gaps": [], "score": 100}


def test_unknown_status_rejected(api_client, snapshot_payload):
    snapshot_payload["narratives"][0]["status"] = "paused"
    response = api_client.post("/api/alignment", json=snapshot_payload)
    assert response.status_code == 422


def test_foreign_workspace_entity_returns_422_with_debug_id(api_client, snapshot_payload):
    snapshot_payload["narratives"][0]["workspace_id"] = "ws-other"

    response = api_client.post("/api/alignment", json=snapshot_payload)

    assert response.status_code == 422
    body = response.json()
    assert "debug_id" in body
    assert "n-uptime" in body["detail"]
