from __future__ import annotations

from typing import Dict, Iterable, List

import pandas as pd

from .inputs import LifeStatus, ProjectionResult, SimulationSnapshot
from .simulator import project, projections_frame


def compare_simulations(
    simulations: Iterable[SimulationSnapshot], status: LifeStatus, end_year: int
) -> List[ProjectionResult]:
    """Independent projections sharing one status and end year, in input order."""
    return [project(simulation, status, end_year) for simulation in simulations]


def compare_statuses(simulation: SimulationSnapshot, end_year: int) -> Dict[LifeStatus, ProjectionResult]:
    """Project the same simulation once per life status."""
    return {status: project(simulation, status, end_year) for status in LifeStatus}


def comparison_frame(results: Iterable[ProjectionResult]) -> pd.DataFrame:
    """Stack several projections into one frame indexed by (simulation_id, status, year)."""
    frames = []
    for result in results:
        frames.append(
            projections_frame(result)
            .reset_index()
            .assign(simulation_id=result.simulation_id, status=result.status.value)
        )
    if not frames:
        return pd.DataFrame()
    return pd.concat(frames, ignore_index=True).set_index(["simulation_id", "status", "year"])
