from __future__ import annotations

from dataclasses import asdict

import pandas as pd

from wealth_projection.logging import get_logger

from .engine import run_projection
from .inputs import LifeStatus, ProjectionResult, SimulationSnapshot

logger = get_logger(__name__)

PROJECTION_COLUMNS = [
    "financial_assets",
    "real_estate_assets",
    "total_patrimony",
    "total_patrimony_without_insurance",
    "total_income",
    "total_expenses",
    "net_result",
    "insurance_value",
]


def project(simulation: SimulationSnapshot, status: LifeStatus, end_year: int) -> ProjectionResult:
    """Year-by-year patrimony projection of one simulation under a life status.

    Pure function of its inputs. An ``end_year`` before the simulation start year
    yields an empty projection list.
    """
    status = LifeStatus(status)
    logger.debug(
        "Projecting simulation %s (%s) %d-%d",
        simulation.id,
        status.value,
        simulation.start_year,
        end_year,
        extra={"extra": {"simulation_id": simulation.id, "status": status.value}},
    )
    projections = run_projection(simulation, status, end_year)
    return ProjectionResult(
        simulation_id=simulation.id,
        simulation_name=simulation.name,
        status=status,
        start_year=simulation.start_year,
        end_year=end_year,
        real_rate=simulation.real_rate,
        projections=tuple(projections),
    )


def projections_frame(result: ProjectionResult) -> pd.DataFrame:
    if not result.projections:
        return pd.DataFrame(columns=PROJECTION_COLUMNS, index=pd.Index([], name="year"))
    return pd.DataFrame([asdict(p) for p in result.projections]).set_index("year")[PROJECTION_COLUMNS]
