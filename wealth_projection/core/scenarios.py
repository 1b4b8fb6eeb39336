from __future__ import annotations

from datetime import date

from .inputs import (
    Asset,
    AssetRecord,
    AssetType,
    Client,
    Financing,
    Frequency,
    IncomeCategory,
    Insurance,
    InsuranceType,
    Movement,
    MovementType,
    SimulationSnapshot,
)


def base_scenario() -> SimulationSnapshot:
    """Provide a reasonable family plan for the CLI and for smoke tests."""
    assets = (
        Asset(
            id=1,
            name="Investment portfolio",
            type=AssetType.FINANCIAL,
            records=(
                AssetRecord(id=1, value=450_000, date=date(2024, 6, 1)),
                AssetRecord(id=2, value=500_000, date=date(2025, 1, 1)),
            ),
        ),
        Asset(
            id=2,
            name="Apartment",
            type=AssetType.REAL_ESTATE,
            records=(AssetRecord(id=3, value=1_200_000, date=date(2025, 1, 1)),),
        ),
        Asset(
            id=3,
            name="Beach house",
            type=AssetType.REAL_ESTATE,
            records=(AssetRecord(id=4, value=800_000, date=date(2025, 6, 1)),),
            financing=Financing(
                start_date=date(2025, 6, 1),
                installments=120,
                interest_rate=0.09,
                down_payment=200_000,
            ),
        ),
    )

    movements = (
        Movement(
            id=1,
            name="Salary",
            type=MovementType.INCOME,
            category=IncomeCategory.WORK,
            value=15_000,
            frequency=Frequency.MONTHLY,
            start_date=date(2025, 1, 1),
            end_date=date(2045, 12, 31),
        ),
        Movement(
            id=2,
            name="Rental income",
            type=MovementType.INCOME,
            category=IncomeCategory.PASSIVE,
            value=4_000,
            frequency=Frequency.MONTHLY,
            start_date=date(2025, 1, 1),
        ),
        Movement(
            id=3,
            name="Inheritance",
            type=MovementType.INCOME,
            category=IncomeCategory.OTHER,
            value=220_000,
            frequency=Frequency.ONCE,
            start_date=date(2030, 7, 1),
        ),
        Movement(
            id=4,
            name="Cost of living",
            type=MovementType.EXPENSE,
            value=8_000,
            frequency=Frequency.MONTHLY,
            start_date=date(2025, 1, 1),
            end_date=date(2040, 12, 31),
        ),
        Movement(
            id=5,
            name="Cost of living",
            type=MovementType.EXPENSE,
            value=10_000,
            frequency=Frequency.MONTHLY,
            start_date=date(2041, 1, 1),
        ),
        Movement(
            id=6,
            name="School fees",
            type=MovementType.EXPENSE,
            value=30_000,
            frequency=Frequency.YEARLY,
            start_date=date(2025, 1, 1),
            end_date=date(2036, 12, 31),
        ),
    )

    insurances = (
        Insurance(
            id=1,
            name="Term life",
            type=InsuranceType.LIFE,
            start_date=date(2025, 1, 1),
            duration_months=240,
            premium=450,
            insured_value=1_500_000,
        ),
        Insurance(
            id=2,
            name="Disability cover",
            type=InsuranceType.DISABILITY,
            start_date=date(2025, 3, 1),
            duration_months=120,
            premium=180,
            insured_value=600_000,
        ),
    )

    return SimulationSnapshot(
        id=1,
        name="Original plan",
        start_date=date(2025, 1, 1),
        real_rate=0.04,
        assets=assets,
        movements=movements,
        insurances=insurances,
        client=Client(id=1, name="Sample client", birth_date=date(1980, 1, 15)),
    )
