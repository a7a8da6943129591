"""
Tests for interaction analysis endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from app.schemas.interaction import AdministrationRoute

ANALYZE_URL = "/api/v1/interactions/analyze"


def test_analyze_requires_auth(test_client: TestClient, analysis_payload):
    response = test_client.post(ANALYZE_URL, json=analysis_payload("warfarin", "aspirin"))

    assert response.status_code == 401


def test_analyze_rejects_invalid_key(test_client: TestClient, analysis_payload):
    response = test_client.post(
        ANALYZE_URL,
        json=analysis_payload("warfarin", "aspirin"),
        headers={"X-API-Key": "invalid-key"},
    )

    assert response.status_code == 403


def test_analyze_warfarin_aspirin(test_client: TestClient, api_key_headers, analysis_payload):
    response = test_client.post(
        ANALYZE_URL,
        json=analysis_payload("warfarin", "aspirin"),
        headers=api_key_headers,
    )

    assert response.status_code == 200
    assert response.headers["x-cache"] == "MISS"
    data = response.json()

    (record,) = data["interactionResults"]
    assert record["drugPair"] == ["Warfarin", "Aspirin"]
    assert record["riskLevel"] == "high"
    assert record["compatibilityStatus"] == "incompatible"
    assert record["evidence"]["literatureCitations"]
    assert data["overallRiskLevel"] == "high"
    assert data["overallCompatibilityStatus"] == "incompatible"
    assert data["databaseVersion"] == "2024.1"


def test_analyze_with_patient_data(test_client: TestClient, api_key_headers, analysis_payload):
    payload = analysis_payload(
        "warfarin", "aspirin", "lisinopril",
        patientData={"age": 70, "sex": "female", "clinicalParameters": {"eGFR": 45}},
    )

    response = test_client.post(ANALYZE_URL, json=payload, headers=api_key_headers)

    assert response.status_code == 200
    data = response.json()

    assert len(data["interactionResults"]) == 3
    assert data["overallRiskLevel"] == "critical"
    assert [a["drugs"] for a in data["advisories"]] == [["Warfarin"], ["Lisinopril"]]
    assert {a["category"] for a in data["advisories"]} == {"patient"}


def test_analyze_with_food_and_alcohol(test_client: TestClient, api_key_headers, analysis_payload):
    payload = analysis_payload(
        "warfarin", "lisinopril",
        foodItems=["Grapefruit"],
        alcohol={"hasInteraction": True},
    )

    response = test_client.post(ANALYZE_URL, json=payload, headers=api_key_headers)

    assert response.status_code == 200
    data = response.json()

    assert data["interactionResults"][0]["riskLevel"] == "none"
    assert [a["category"] for a in data["advisories"]] == ["food", "alcohol"]
    assert data["overallRiskLevel"] == "high"
    assert data["overallCompatibilityStatus"] == "compatible"


def test_analyze_single_drug(test_client: TestClient, api_key_headers, analysis_payload):
    response = test_client.post(
        ANALYZE_URL,
        json=analysis_payload("warfarin"),
        headers=api_key_headers,
    )

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "InsufficientInputError"
    assert "timestamp" in data


def test_analyze_unresolved_entries_are_skipped(test_client: TestClient, api_key_headers, analysis_payload):
    payload = analysis_payload("warfarin", "aspirin")
    payload["drugs"].append({"drugId": "", "drugName": "Something typed"})

    response = test_client.post(ANALYZE_URL, json=payload, headers=api_key_headers)

    assert response.status_code == 200
    assert len(response.json()["interactionResults"]) == 1


def test_analyze_empty_list(test_client: TestClient, api_key_headers):
    response = test_client.post(ANALYZE_URL, json={"drugs": []}, headers=api_key_headers)

    assert response.status_code == 422


def test_analyze_too_many_drugs(test_client: TestClient, api_key_headers, analysis_payload, catalog):
    ids = [d.id for d in catalog.list_all()[:11]]

    response = test_client.post(ANALYZE_URL, json=analysis_payload(*ids), headers=api_key_headers)

    assert response.status_code == 400


def test_analyze_invalid_route(test_client: TestClient, api_key_headers, analysis_payload):
    payload = analysis_payload("warfarin", "aspirin")
    payload["drugs"][0]["route"] = "sublingual"

    response = test_client.post(ANALYZE_URL, json=payload, headers=api_key_headers)

    assert response.status_code == 422


@pytest.mark.parametrize("route", ["oral", "Inhalation", " TRANSDERMAL ", ""])
def test_analyze_accepts_listed_routes(test_client: TestClient, api_key_headers, analysis_payload, route):
    payload = analysis_payload("warfarin", "aspirin")
    payload["drugs"][0]["route"] = route

    response = test_client.post(ANALYZE_URL, json=payload, headers=api_key_headers)

    assert response.status_code == 200


def test_route_options():
    assert [r.value for r in AdministrationRoute] == [
        "oral", "intravenous", "intramuscular", "subcutaneous",
        "topical", "inhalation", "rectal", "transdermal",
    ]


def test_known_interactions(test_client: TestClient):
    response = test_client.get("/api/v1/interactions/known")

    assert response.status_code == 200
    data = response.json()

    assert len(data) == 16
    assert {"drugIds", "riskLevel", "compatibilityStatus"} <= set(data[0])
