"""Integration tests for cycle default suggestions."""

import pytest

pytestmark = pytest.mark.integration


def test_quarter_suggestion_skips_existing(api_client, snapshot_payload):
    response = api_client.post("/api/cycles/defaults", json=snapshot_payload)
    assert response.status_code == 200
    assert response.json() == {"name": "Q3 2025", "start_date": "2025-07-01", "end_date": "2025-09-30"}


def test_rolling_cycle_suggestion(api_client, snapshot_payload):
    snapshot_payload["workspace"]["planning_rhythm"] = "cycles"
    snapshot_payload["workspace"]["cycle_length_weeks"] = 6

    data = api_client.post("/api/cycles/defaults", json=snapshot_payload).json()

    assert data == {"name": "Cycle 2", "start_date": "2025-07-01", "end_date": "2025-08-11"}


def test_exhausted_quarters_return_empty_strings(api_client, snapshot_payload):
    snapshot_payload["cycles"] = [
        {
            "id": f"c-{n}-{y}",
            "name": f"Q{n} {y}",
            "start_date": f"{y}-01-01T00:00:00Z",
            "end_date": f"{y}-12-31T00:00:00Z",
        }
        for y in (2025, 2026)
        for n in (1, 2, 3, 4)
    ]
    data = api_client.post("/api/cycles/defaults", json=snapshot_payload).json()
    assert data == {"name": "", "start_date": "", "end_date": ""}


def test_invalid_cycle_length_rejected(api_client, snapshot_payload):
    snapshot_payload["workspace"]["cycle_length_weeks"] = 0
    assert api_client.post("/api/cycles/defaults", json=snapshot_payload).status_code == 422
