"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from wealth_projection.core.inputs import (
    Asset,
    AssetRecord,
    AssetType,
    Frequency,
    IncomeCategory,
    Movement,
    MovementType,
    SimulationSnapshot,
)


def make_simulation(**overrides) -> SimulationSnapshot:
    """Empty 2024 simulation growing at 4%, with any field overridden."""
    values = {
        "id": 1,
        "name": "Test",
        "start_date": date(2024, 1, 1),
        "real_rate": 0.04,
    }
    values.update(overrides)
    return SimulationSnapshot(**values)


def financial_asset(value: float, on: date = date(2024, 1, 1), asset_id: int = 1) -> Asset:
    return Asset(
        id=asset_id,
        name="Investment",
        type=AssetType.FINANCIAL,
        records=(AssetRecord(id=asset_id, value=value, date=on),),
    )


def monthly(
    movement_id: int,
    movement_type: MovementType,
    value: float,
    category: IncomeCategory = None,
    start: date = date(2024, 1, 1),
    end: date = None,
) -> Movement:
    return Movement(
        id=movement_id,
        type=movement_type,
        category=category,
        value=value,
        frequency=Frequency.MONTHLY,
        start_date=start,
        end_date=end,
    )


@pytest.fixture
def empty_simulation() -> SimulationSnapshot:
    return make_simulation()


@pytest.fixture
def salary() -> Movement:
    return monthly(1, MovementType.INCOME, 10_000, IncomeCategory.WORK)


@pytest.fixture
def rent() -> Movement:
    return monthly(2, MovementType.INCOME, 2_000, IncomeCategory.PASSIVE)


@pytest.fixture
def living_costs() -> Movement:
    return monthly(3, MovementType.EXPENSE, 1_000)
