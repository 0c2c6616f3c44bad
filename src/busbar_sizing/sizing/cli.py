from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from ..config import load_settings
from ..errors import BusbarCalculationError, BusbarValidationError
from ..logging_config import setup_logging
from .materials import MATERIALS
from .models import parse_busbar_input
from .simulate import simulate_transient
from .sizer import compute_sizing
from .standard_configs import all_configs, configs_for_voltage_level, get_config

logger = logging.getLogger(__name__)

# (JSON key, prompt, minimum)
_REQUIRED_NUMBERS = [
    ("current", "Load current (A): ", 0.0001),
    ("voltage", "System voltage (kV): ", 0.0001),
    ("busbarWidth", "Busbar width (mm): ", 0.0001),
    ("busbarThickness", "Busbar thickness (mm): ", 0.0001),
    ("busbarLength", "Busbar length (mm): ", 0.0001),
    ("shortCircuitCurrent", "Short-circuit current (kA): ", 0.0001),
    ("phaseDistance", "Phase distance (mm): ", 0.0001),
]


def _prompt_positive(prompt: str, minimum: float) -> float:
    """Ask until the answer parses as a number no smaller than ``minimum``."""
    while True:
        answer = input(prompt).strip()
        try:
            value = float(answer)
        except ValueError:
            print(f"Not a number: {answer!r}", file=sys.stderr)
            continue
        if value < minimum:
            print(f"Must be at least {minimum:g}.", file=sys.stderr)
            continue
        return value


def load_inputs(path: str | None, config_id: str | None, *, interactive: bool) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if config_id:
        config = get_config(config_id)
        if config is None:
            raise FileNotFoundError(f"Standard configuration not found: {config_id}")
        data = config.to_input().model_dump(by_alias=True, mode="json", exclude_none=True)
    if path:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Input JSON not found: {path}")
        data.update(json.loads(p.read_text()))

    # Ask for required fields if missing
    if interactive:
        if "material" not in data:
            data["material"] = input("Material (Copper/Aluminum): ").strip() or "Copper"
        for key, prompt, minimum in _REQUIRED_NUMBERS:
            if key not in data:
                data[key] = _prompt_positive(prompt, minimum)

    return data


def _print_validation_error(exc: BusbarValidationError) -> None:
    print("Input validation error:", file=sys.stderr)
    for issue in exc.issues:
        print(f"- {issue.field}: {issue.message}", file=sys.stderr)


def _cmd_size(args: argparse.Namespace) -> int:
    raw = load_inputs(args.input, args.config, interactive=args.interactive)
    inputs = parse_busbar_input(raw)
    result = compute_sizing(inputs)
    logger.info("Sized %s busbar %gx%g mm at %g A", inputs.material, inputs.busbar_width, inputs.busbar_thickness, inputs.current)

    Path(args.output).write_text(json.dumps(result.to_api_dict(), indent=2))

    # Minimal console summary
    print(f"Sufficient: {result.is_sizing_sufficient}")
    print(f"Required cross-section: {result.required_cross_section_area:.1f} mm² (limit {result.current_density:.2f} A/mm²)")
    print(f"Temperature rise: {result.temperature_rise:.2f} °C (max {result.max_allowable_temperature:.0f} °C)")
    print(f"Short-circuit force: {result.short_circuit_force:.1f} N")
    print(f"Mechanical stress: {result.mechanical_stress / 1e6:.2f} MPa (max {result.max_allowable_mechanical_stress / 1e6:.0f} MPa)")
    print(f"Recommended sizes: {', '.join(result.recommended_standard_sizes)}")
    return 0 if result.is_sizing_sufficient else 1


def _cmd_simulate(args: argparse.Namespace, settings) -> int:
    raw = load_inputs(args.input, args.config, interactive=args.interactive)
    inputs = parse_busbar_input(raw)
    duration = settings.default_simulation_duration if args.duration is None else args.duration
    steps = settings.default_time_steps if args.time_steps is None else args.time_steps
    series = simulate_transient(inputs, duration, steps)
    logger.info("Simulated short circuit: %g s, %d steps", duration, steps)

    Path(args.output).write_text(series.model_dump_json(by_alias=True, indent=2))
    if args.csv:
        series.to_dataframe().to_csv(args.csv, index=False)

    print(f"Max current: {series.max_current / 1000:.2f} kA")
    print(f"Max force: {series.max_force:.1f} N")
    print(f"Max temperature: {series.max_temperature:.2f} °C")
    return 0


def _cmd_materials(args: argparse.Namespace) -> int:
    for name in MATERIALS:
        p = MATERIALS[name]
        print(
            f"{p.name}: {p.current_density_limit} A/mm², ρ={p.resistivity:.3g} Ω·m, "
            f"Tmax={p.max_allowable_temperature:g} °C, σmax={p.max_allowable_mechanical_stress / 1e6:g} MPa, "
            f"c={p.specific_heat:g} J/(kg·K)"
        )
    return 0


def _cmd_configs(args: argparse.Namespace) -> int:
    configs = configs_for_voltage_level(args.voltage_level) if args.voltage_level else all_configs()
    for c in configs:
        print(f"{c.id:6s} {c.name:26s} {c.voltage:g} kV, {c.current:g} A, {c.material} {c.width:g}x{c.thickness:g} mm")
    return 0


def _add_input_options(p: argparse.ArgumentParser, default_output: str) -> None:
    p.add_argument("--input", "-i", help="Path to busbar input JSON.")
    p.add_argument("--config", "-c", help="Start from a standard configuration id (e.g. lv-1).")
    p.add_argument(
        "--output",
        "-o",
        default=default_output,
        help="Path to write the output JSON.",
    )
    p.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for missing required inputs.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Busbar thermal/mechanical sizing and short-circuit simulation."
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level.")
    parser.add_argument("--settings", default=None, help="Path to a JSON settings file.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_size = sub.add_parser("size", help="Check a busbar geometry and recommend standard sizes.")
    _add_input_options(p_size, "busbar_result.json")

    p_sim = sub.add_parser("simulate", help="Short-circuit transient time series.")
    _add_input_options(p_sim, "short_circuit_simulation.json")
    p_sim.add_argument("--duration", type=float, default=None, help="Simulated duration (s), 0 < d <= 10.")
    p_sim.add_argument("--time-steps", type=int, default=None, help="Number of samples, 10..1000.")
    p_sim.add_argument("--csv", default=None, help="Also write the time series as CSV.")

    sub.add_parser("materials", help="List conductor materials.")

    p_cfg = sub.add_parser("configs", help="List standard configurations.")
    p_cfg.add_argument("--voltage-level", default=None, help="LV, MV or HV.")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.settings)
        setup_logging(args.log_level or settings.log_level, settings.log_dir)
    except (FileNotFoundError, ValueError) as e:
        # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
        print(f"Settings error: {e}", file=sys.stderr)
        return 2

    try:
        if args.command == "size":
            return _cmd_size(args)
        if args.command == "simulate":
            return _cmd_simulate(args, settings)
        if args.command == "materials":
            return _cmd_materials(args)
        return _cmd_configs(args)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Input error: {e}", file=sys.stderr)
        return 2
    except BusbarValidationError as e:
        logger.warning("Rejected input: %s", ", ".join(e.fields))
        _print_validation_error(e)
        return 2
    except BusbarCalculationError as e:
        print(f"Calculation error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
