"""Tests for the short-circuit transient simulation."""

import math

import pytest

from busbar_sizing.errors import InvalidSimulationParametersError, MissingPrerequisiteDataError
from busbar_sizing.sizing.models import parse_busbar_input
from busbar_sizing.sizing.simulate import simulate_transient
from busbar_sizing.sizing.sizer import size_busbar


@pytest.mark.parametrize("duration, steps", [(1.0, 100), (0.25, 10), (10.0, 1000), (0.05, 37)])
def test_time_axis(lv_panel_payload, duration, steps):
    series = simulate_transient(parse_busbar_input(lv_panel_payload), duration, steps)
    assert len(series.time_points) == steps
    assert len(series.current_values) == steps
    assert len(series.force_values) == steps
    assert len(series.temperature_values) == steps
    assert series.time_points[0] == 0.0
    assert series.time_points[-1] == duration
    assert series.time_points == sorted(series.time_points)


def test_maxima_bound_every_sample(lv_panel_payload):
    series = simulate_transient(parse_busbar_input(lv_panel_payload), 0.5, 250)
    assert all(series.max_current >= abs(i) for i in series.current_values)
    assert series.max_current == max(abs(i) for i in series.current_values)
    assert series.max_force == max(series.force_values)
    assert series.max_temperature == max(series.temperature_values)


def test_initial_sample_is_dc_offset_peak(lv_panel_payload):
    series = simulate_transient(parse_busbar_input(lv_panel_payload), 1.0, 100)
    # 2.5 * 50 kA at t = 0, no AC contribution yet
    assert series.current_values[0] == pytest.approx(125000.0)
    assert series.force_values[0] == pytest.approx(2e-7 * 125000.0**2 * 1.0 / 0.2)
    assert series.temperature_values[0] == pytest.approx(40.0)


def test_samples_follow_model(lv_panel_payload):
    lv_panel_payload["ambientTemperature"] = 25
    series = simulate_transient(parse_busbar_input(lv_panel_payload), 0.2, 41)
    k = 17
    t = series.time_points[k]
    i = 125000.0 * math.exp(-t / 0.1) * math.cos(2 * math.pi * 50 * t) + 50000.0 * math.sqrt(2) * math.sin(
        2 * math.pi * 50 * t
    )
    assert series.current_values[k] == pytest.approx(i)
    assert series.force_values[k] == pytest.approx(abs(2e-7 * i**2 * 1.0 / 0.2))
    assert series.temperature_values[k] == pytest.approx(25 + (i / 1000) ** 2 * 0.05 * t * 10)


def test_accepts_result_shaped_mapping(lv_panel_payload):
    busbar_data = {**size_busbar(lv_panel_payload).to_api_dict(), **lv_panel_payload, "ambientTemperature": 40}
    series = simulate_transient(busbar_data, 0.1, 20)
    assert len(series.time_points) == 20


def test_accepts_snake_case_and_numeric_strings():
    busbar_data = {
        "ambient_temperature": "30",
        "short_circuit_current": "25",
        "busbar_length": 800,
        "phase_distance": 300.0,
    }
    series = simulate_transient(busbar_data, 0.1, 10)
    assert series.current_values[0] == pytest.approx(25000 * 2.5)


def test_deterministic(lv_panel_payload):
    inputs = parse_busbar_input(lv_panel_payload)
    assert simulate_transient(inputs, 0.3, 300) == simulate_transient(inputs, 0.3, 300)


def test_series_to_dataframe(lv_panel_payload):
    frame = simulate_transient(parse_busbar_input(lv_panel_payload), 0.1, 10).to_dataframe()
    assert list(frame.columns) == ["time_s", "current_a", "force_n", "temperature_c"]
    assert len(frame) == 10


@pytest.mark.parametrize(
    "duration, steps",
    [(0, 100), (-1.0, 100), (10.5, 100), (1.0, 9), (1.0, 1001), (1.0, 10.5), (1.0, True), ("abc", 100), (1.0, None)],
)
def test_invalid_parameters(lv_panel_payload, duration, steps):
    with pytest.raises(InvalidSimulationParametersError):
        simulate_transient(parse_busbar_input(lv_panel_payload), duration, steps)


def test_missing_busbar_data():
    with pytest.raises(MissingPrerequisiteDataError) as excinfo:
        simulate_transient(None, 1.0, 100)
    assert "phaseDistance" in excinfo.value.missing


def test_missing_fields_are_listed():
    busbar_data = {"ambientTemperature": 40, "shortCircuitCurrent": 50, "busbarLength": 0}
    with pytest.raises(MissingPrerequisiteDataError) as excinfo:
        simulate_transient(busbar_data, 1.0, 100)
    assert excinfo.value.missing == ("busbarLength", "phaseDistance")
    assert excinfo.value.to_dict()["missing"] == ["busbarLength", "phaseDistance"]


def test_non_mapping_busbar_data():
    with pytest.raises(MissingPrerequisiteDataError):
        simulate_transient("not a busbar", 1.0, 100)


def test_ambient_temperature_defaults_when_absent(lv_panel_payload):
    assert "ambientTemperature" not in lv_panel_payload
    series = simulate_transient(lv_panel_payload, 0.5, 60)
    assert series.temperature_values[0] == pytest.approx(40.0)
    assert len(series.time_points) == 60


@pytest.mark.parametrize("ambient", ["warm", 150, -60, float("nan"), True])
def test_invalid_ambient_temperature_is_reported(lv_panel_payload, ambient):
    busbar_data = {**lv_panel_payload, "ambientTemperature": ambient}
    with pytest.raises(MissingPrerequisiteDataError) as excinfo:
        simulate_transient(busbar_data, 1.0, 100)
    assert excinfo.value.missing == ("ambientTemperature",)


def test_numeric_string_parameters(lv_panel_payload):
    series = simulate_transient(lv_panel_payload, "0.5", " 100 ")
    assert len(series.time_points) == 100
    assert series.time_points[-1] == 0.5
    assert len(simulate_transient(lv_panel_payload, 1.0, "20.0").time_points) == 20


@pytest.mark.parametrize("steps", ["12.5", "many", "5", ""])
def test_invalid_string_time_steps(lv_panel_payload, steps):
    with pytest.raises(InvalidSimulationParametersError, match="timeSteps"):
        simulate_transient(lv_panel_payload, 1.0, steps)
