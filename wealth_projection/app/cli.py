from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from wealth_projection.config import ProjectionSettings
from wealth_projection.core.inputs import LifeStatus, SimulationSnapshot
from wealth_projection.core.loader import result_to_dict, snapshot_from_dict
from wealth_projection.core.mortgage import amortization_schedule
from wealth_projection.core.scenarios import base_scenario
from wealth_projection.core.stats import simulation_stats
from wealth_projection.core.what_if import comparison_frame
from wealth_projection.exceptions import ProjectionError
from wealth_projection.logging import get_logger, setup_logging
from wealth_projection.service import ProjectionService, SimulationRepository

logger = get_logger(__name__)


def build_parser(settings: ProjectionSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wealth-projection",
        description="Project year-by-year net worth of a simulation under a life status.",
    )
    parser.add_argument(
        "snapshot",
        nargs="?",
        type=Path,
        help="JSON file holding a hydrated simulation (defaults to the built-in sample plan)",
    )
    parser.add_argument(
        "--status",
        choices=[s.value for s in LifeStatus],
        default=LifeStatus.ALIVE.value,
        help="Life status assumption (default: ALIVE)",
    )
    parser.add_argument(
        "--end-year",
        type=int,
        default=settings.default_end_year,
        help=f"Last projected year (default: {settings.default_end_year})",
    )
    parser.add_argument("--compare-statuses", action="store_true", help="Project every life status side by side")
    parser.add_argument("--schedule", action="store_true", help="Print amortization schedules of financed assets")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of tables")
    return parser


def load_snapshot(path: Optional[Path]) -> SimulationSnapshot:
    if path is None:
        return base_scenario()
    with path.open(encoding="utf-8") as fh:
        return snapshot_from_dict(json.load(fh))


def _print_frame(df: pd.DataFrame) -> None:
    with pd.option_context("display.max_rows", None, "display.width", 200, "display.float_format", "{:,.2f}".format):
        print(df.to_string())


def main(argv: Optional[List[str]] = None) -> int:
    settings = ProjectionSettings.from_env()
    setup_logging(settings.log_level, settings.log_format)
    args = build_parser(settings).parse_args(argv)

    try:
        simulation = load_snapshot(args.snapshot)
        repository = SimulationRepository()
        repository.add(simulation)
        service = ProjectionService(repository, settings)

        if args.compare_statuses:
            results = list(service.compare_statuses(simulation.id, args.end_year).values())
        else:
            results = [service.generate_projection(simulation.id, args.status, args.end_year)]
    except (OSError, json.JSONDecodeError, ProjectionError) as exc:
        logger.error("Unable to run projection: %s", exc)
        return 1

    if args.json:
        print(json.dumps([result_to_dict(r) for r in results], indent=2))
        return 0

    _print_frame(comparison_frame(results))

    stats = simulation_stats(simulation, args.end_year, LifeStatus(args.status))
    print(f"\nFinal patrimony ({args.status}): {stats.final_patrimony:,.2f}")
    if stats.retirement_age is not None:
        print(f"Retirement age: {stats.retirement_age}")

    if args.schedule:
        for asset in simulation.financed_assets:
            print(f"\nAmortization schedule: {asset.name or asset.id}")
            _print_frame(amortization_schedule(asset))
    return 0


if __name__ == "__main__":
    sys.exit(main())
