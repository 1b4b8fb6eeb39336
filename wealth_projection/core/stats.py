from __future__ import annotations

from typing import Optional

from .engine import initial_state, round_money, step_year
from .inputs import LifeStatus, ProjectionStats, SimulationSnapshot


def retirement_year(simulation: SimulationSnapshot, end_year: int) -> Optional[int]:
    """Year the last WORK income stops; open-ended work income runs to ``end_year``."""
    work = [m for m in simulation.movements if m.is_work_income]
    if not work:
        return None
    return max(m.last_year(end_year) for m in work)


def simulation_stats(
    simulation: SimulationSnapshot, end_year: int, status: LifeStatus = LifeStatus.ALIVE
) -> ProjectionStats:
    state = initial_state(simulation)
    for year in range(simulation.start_year, end_year + 1):
        state, _ = step_year(state, simulation, year, status, end_year)

    retirement_age = None
    retired_in = retirement_year(simulation, end_year)
    if retired_in is not None and simulation.client is not None:
        retirement_age = retired_in - simulation.client.birth_date.year

    return ProjectionStats(
        final_patrimony=round_money(state.financial_assets + state.real_estate_assets),
        retirement_age=retirement_age,
    )
