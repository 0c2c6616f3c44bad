"""
Busbar API Routes

REST endpoints over the sizing core: sizing calculation, short-circuit
transient simulation, and the material / voltage-level / standard
configuration catalogs consumed by the front end.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, HTTPException, Query, Request, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..sizing.materials import MATERIAL_NAMES
from ..sizing.models import parse_busbar_input
from ..sizing.simulate import simulate_transient
from ..sizing.sizer import compute_sizing
from ..sizing.standard_configs import VOLTAGE_LEVELS, all_configs, configs_for_voltage_level, get_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/busbar", tags=["busbar"])


class ShortCircuitSimulationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Validated by simulate_transient, which names what is missing.
    busbar_data: Optional[Any] = Field(
        None, validation_alias=AliasChoices("busbarData", "busbarInput", "busbar_data")
    )
    duration: Optional[Any] = None
    time_steps: Optional[Any] = Field(None, validation_alias=AliasChoices("timeSteps", "time_steps"))


@router.post("/calculate")
async def calculate(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    inputs = parse_busbar_input(payload)
    result = compute_sizing(inputs)
    logger.info(
        "Calculated %s %gx%g mm at %g A: sufficient=%s",
        inputs.material, inputs.busbar_width, inputs.busbar_thickness, inputs.current,
        result.is_sizing_sufficient,
    )
    return dict(result.to_api_dict())


@router.post("/simulate-short-circuit")
async def simulate_short_circuit(request: Request, payload: ShortCircuitSimulationRequest) -> Dict[str, Any]:
    settings = request.app.state.settings
    duration = settings.default_simulation_duration if payload.duration is None else payload.duration
    steps = settings.default_time_steps if payload.time_steps is None else payload.time_steps

    series = simulate_transient(payload.busbar_data, duration, steps)
    logger.info("Short-circuit simulation: duration=%s steps=%s max_current=%.1f A", duration, steps, series.max_current)
    return series.model_dump(mode="json", by_alias=True)


@router.get("/materials")
async def get_materials() -> List[str]:
    return list(MATERIAL_NAMES)


@router.get("/voltage-levels")
async def get_voltage_levels() -> List[str]:
    return list(VOLTAGE_LEVELS)


@router.get("/standard-configs")
async def get_standard_configs(
    voltage_level: Optional[str] = Query(None, alias="voltageLevel"),
) -> List[Dict[str, Any]]:
    configs = configs_for_voltage_level(voltage_level) if voltage_level else all_configs()
    return [c.to_dict() for c in configs]


@router.get("/standard-configs/{config_id}")
async def get_standard_config(config_id: str) -> Dict[str, Any]:
    config = get_config(config_id)
    if config is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Standard configuration not found: {config_id}",
        )
    return config.to_dict()
