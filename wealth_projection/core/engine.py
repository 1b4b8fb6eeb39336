from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .budget import yearly_expenses, yearly_income
from .coverage import active_insurance_value, yearly_premiums
from .inputs import LifeStatus, ProjectionYear, SimulationSnapshot
from .mortgage import yearly_financing_payments
from .valuation import assets_by_type


@dataclass(frozen=True)
class YearState:
    """Patrimony carried from one year to the next."""

    financial_assets: float
    real_estate_assets: float


def round_money(value: float) -> float:
    """Round half-up to cents."""
    return float(np.floor(value * 100 + 0.5) / 100)


def initial_state(simulation: SimulationSnapshot) -> YearState:
    financial, real_estate = assets_by_type(simulation.assets, simulation.start_date)
    return YearState(financial_assets=financial, real_estate_assets=real_estate)


def step_year(
    state: YearState, simulation: SimulationSnapshot, year: int, status: LifeStatus, end_year: int
) -> Tuple[YearState, ProjectionYear]:
    """Advance the patrimony one calendar year and report that year."""
    total_income = yearly_income(simulation.movements, year, status, end_year)
    total_expenses = yearly_expenses(simulation.movements, year, status, end_year)
    insurance_premiums = yearly_premiums(simulation.insurances, year)
    financing_payments = yearly_financing_payments(simulation.financed_assets, year)

    net_result = total_income - total_expenses - insurance_premiums - financing_payments

    # Net cash flow lands in the financial bucket only; real estate just compounds.
    growth_factor = 1 + simulation.real_rate
    financial_assets = max(0.0, (state.financial_assets + net_result) * growth_factor)
    real_estate_assets = state.real_estate_assets * growth_factor

    insurance_value = active_insurance_value(simulation.insurances, year)
    without_insurance = financial_assets + real_estate_assets

    record = ProjectionYear(
        year=year,
        financial_assets=round_money(financial_assets),
        real_estate_assets=round_money(real_estate_assets),
        total_patrimony=round_money(without_insurance + insurance_value),
        total_patrimony_without_insurance=round_money(without_insurance),
        total_income=round_money(total_income),
        total_expenses=round_money(total_expenses + insurance_premiums + financing_payments),
        net_result=round_money(net_result),
        insurance_value=round_money(insurance_value),
    )
    return YearState(financial_assets, real_estate_assets), record


def run_projection(simulation: SimulationSnapshot, status: LifeStatus, end_year: int) -> List[ProjectionYear]:
    """Fold ``step_year`` over start year .. ``end_year`` inclusive."""
    state = initial_state(simulation)
    records: List[ProjectionYear] = []
    for year in range(simulation.start_year, end_year + 1):
        state, record = step_year(state, simulation, year, status, end_year)
        records.append(record)
    return records
