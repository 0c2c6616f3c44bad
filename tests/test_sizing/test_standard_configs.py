import pytest

from busbar_sizing.sizing.models import BusbarInput, VoltageLevel
from busbar_sizing.sizing.sizer import compute_sizing
from busbar_sizing.sizing.standard_configs import (
    DEFAULT_LENGTH_MM,
    VOLTAGE_LEVELS,
    all_configs,
    configs_for_voltage_level,
    get_config,
)


def test_voltage_levels():
    assert VOLTAGE_LEVELS == ("LV", "MV", "HV")


def test_nine_configs_with_unique_ids():
    ids = [c.id for c in all_configs()]
    assert len(ids) == 9
    assert len(set(ids)) == 9


@pytest.mark.parametrize("level", ["LV", "mv", " hv "])
def test_filter_by_voltage_level(level):
    configs = configs_for_voltage_level(level)
    assert len(configs) == 3
    assert {c.voltage_level for c in configs} == {level.strip().upper()}


def test_unknown_voltage_level_is_empty():
    assert configs_for_voltage_level("EHV") == []


def test_get_config():
    config = get_config("lv-1")
    assert config.name == "LV Distribution Panel"
    assert (config.width, config.thickness, config.short_circuit_current) == (60, 10, 50)
    assert get_config("xx-9") is None


def test_to_dict_uses_camel_case():
    d = get_config("mv-2").to_dict()
    assert d["voltageLevel"] == "MV"
    assert d["shortCircuitCurrent"] == 31.5
    assert d["phaseDistance"] == 550


def test_to_input_builds_valid_busbar_input():
    inputs = get_config("hv-1").to_input()
    assert isinstance(inputs, BusbarInput)
    assert inputs.voltage_level is VoltageLevel.HV
    assert inputs.busbar_length == DEFAULT_LENGTH_MM
    assert inputs.material == "Aluminum"


def test_to_input_overrides():
    inputs = get_config("lv-1").to_input(busbar_length=500, ambient_temperature=25)
    assert inputs.busbar_length == 500
    assert inputs.ambient_temperature == 25


@pytest.mark.parametrize("config", all_configs(), ids=lambda c: c.id)
def test_every_config_can_be_sized(config):
    result = compute_sizing(config.to_input())
    assert 1 <= len(result.recommended_standard_sizes) <= 3
