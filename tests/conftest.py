import os

import pytest


@pytest.fixture(autouse=True)
def _clean_busbar_environment(monkeypatch):
    """Keep BUSBAR_* settings from the host environment out of every test."""
    for name in list(os.environ):
        if name.startswith("BUSBAR_"):
            monkeypatch.delenv(name)


@pytest.fixture
def lv_panel_payload():
    """Copper LV distribution panel: 800 A, 60x10 mm, 1 m span, 50 kA, 200 mm spacing."""
    return {
        "current": 800,
        "voltage": 0.4,
        "material": "Copper",
        "busbarWidth": 60,
        "busbarThickness": 10,
        "busbarLength": 1000,
        "shortCircuitCurrent": 50,
        "phaseDistance": 200,
    }


@pytest.fixture
def light_duty_payload():
    """Small span and fault level that passes both the thermal and the mechanical check."""
    return {
        "current": 400,
        "voltage": 0.4,
        "material": "Copper",
        "busbarWidth": 100,
        "busbarThickness": 10,
        "busbarLength": 100,
        "shortCircuitCurrent": 1,
        "phaseDistance": 500,
    }
