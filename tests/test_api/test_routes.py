import pytest
from fastapi.testclient import TestClient

from busbar_sizing.api import create_app
from busbar_sizing.config import AppSettings


@pytest.fixture
def client():
    return TestClient(create_app(AppSettings(default_time_steps=25)))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_calculate(client, lv_panel_payload):
    response = client.post("/api/busbar/calculate", json=lv_panel_payload)
    assert response.status_code == 200
    body = response.json()
    assert body["requiredCrossSectionArea"] == pytest.approx(625.0)
    assert body["shortCircuitForce"] == pytest.approx(2500.0)
    assert body["recommendedStandardSizes"] == ["80mm x 10mm", "60mm x 15mm", "100mm x 10mm"]
    assert body["isSizingSufficient"] is False
    assert "ForceDistribution" not in body["advancedResults"]


def test_calculate_with_distributions(client, lv_panel_payload):
    lv_panel_payload["useAdvancedCalculation"] = True
    body = client.post("/api/busbar/calculate", json=lv_panel_payload).json()
    assert len(body["advancedResults"]["ForceDistribution"]) == 100


def test_calculate_validation_errors(client):
    response = client.post("/api/busbar/calculate", json={"current": -1, "material": "Copper"})
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "ValidationError"
    fields = {e["field"] for e in body["errors"]}
    assert {"current", "voltage", "busbarWidth", "phaseDistance"} <= fields


def test_calculate_unknown_material(client, lv_panel_payload):
    lv_panel_payload["material"] = "Gold"
    response = client.post("/api/busbar/calculate", json=lv_panel_payload)
    assert response.status_code == 400
    assert response.json()["error"] == "UnknownMaterial"


def test_simulate_short_circuit(client, lv_panel_payload):
    response = client.post(
        "/api/busbar/simulate-short-circuit",
        json={"busbarData": lv_panel_payload, "duration": 0.5, "timeSteps": 60},
    )
    assert response.status_code == 200
    body = response.json()
    assert len(body["timePoints"]) == 60
    assert body["timePoints"][-1] == pytest.approx(0.5)
    assert body["currentValues"][0] == pytest.approx(125000.0)
    assert body["maxForce"] == max(body["forceValues"])


def test_simulate_uses_default_parameters(client, lv_panel_payload):
    response = client.post("/api/busbar/simulate-short-circuit", json={"busbarInput": lv_panel_payload})
    assert response.status_code == 200
    assert len(response.json()["timePoints"]) == 25


@pytest.mark.parametrize("params", [{"duration": 0}, {"duration": 20}, {"timeSteps": 5}, {"timeSteps": 2000}])
def test_simulate_invalid_parameters(client, lv_panel_payload, params):
    response = client.post("/api/busbar/simulate-short-circuit", json={"busbarData": lv_panel_payload, **params})
    assert response.status_code == 400
    assert response.json()["error"] == "InvalidSimulationParameters"


def test_simulate_without_busbar_data(client):
    response = client.post("/api/busbar/simulate-short-circuit", json={"duration": 1.0, "timeSteps": 100})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "MissingPrerequisiteData"
    assert "shortCircuitCurrent" in body["missing"]


def test_materials(client):
    assert client.get("/api/busbar/materials").json() == ["Copper", "Aluminum"]


def test_voltage_levels(client):
    assert client.get("/api/busbar/voltage-levels").json() == ["LV", "MV", "HV"]


def test_standard_configs(client):
    assert len(client.get("/api/busbar/standard-configs").json()) == 9
    hv = client.get("/api/busbar/standard-configs", params={"voltageLevel": "HV"}).json()
    assert [c["id"] for c in hv] == ["hv-1", "hv-2", "hv-3"]


def test_standard_config_by_id(client):
    response = client.get("/api/busbar/standard-configs/mv-3")
    assert response.status_code == 200
    assert response.json()["material"] == "Aluminum"
    assert client.get("/api/busbar/standard-configs/nope").status_code == 404
