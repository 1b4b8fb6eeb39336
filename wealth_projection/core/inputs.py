from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Tuple


class AssetType(str, Enum):
    FINANCIAL = "FINANCIAL"
    REAL_ESTATE = "REAL_ESTATE"


class MovementType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class IncomeCategory(str, Enum):
    WORK = "WORK"
    PASSIVE = "PASSIVE"
    OTHER = "OTHER"


class Frequency(str, Enum):
    ONCE = "ONCE"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class LifeStatus(str, Enum):
    ALIVE = "ALIVE"
    DEAD = "DEAD"
    INVALID = "INVALID"


class InsuranceType(str, Enum):
    LIFE = "LIFE"
    DISABILITY = "DISABILITY"
    HEALTH = "HEALTH"
    PROPERTY = "PROPERTY"
    OTHER = "OTHER"


@dataclass(frozen=True)
class AssetRecord:
    value: float
    date: date
    id: Optional[int] = None


@dataclass(frozen=True)
class Financing:
    start_date: date
    installments: int  # monthly payments
    interest_rate: float  # annual, divided by 12 for the monthly rate
    down_payment: float = 0.0

    @property
    def start_month_index(self) -> int:
        """0-based month of the first installment (January == 0)."""
        return self.start_date.month - 1


@dataclass(frozen=True)
class Asset:
    id: int
    type: AssetType
    records: Tuple[AssetRecord, ...] = ()
    financing: Optional[Financing] = None
    name: str = ""


@dataclass(frozen=True)
class Movement:
    id: int
    type: MovementType
    value: float
    frequency: Frequency
    start_date: date
    end_date: Optional[date] = None  # open-ended: runs to the projection end year
    category: Optional[IncomeCategory] = None  # only meaningful for INCOME
    name: str = ""

    @property
    def first_year(self) -> int:
        return self.start_date.year

    def last_year(self, projection_end_year: int) -> int:
        """Last active calendar year, falling back to the projection end year."""
        return self.end_date.year if self.end_date is not None else projection_end_year

    @property
    def is_work_income(self) -> bool:
        return self.type is MovementType.INCOME and self.category is IncomeCategory.WORK


@dataclass(frozen=True)
class Insurance:
    id: int
    start_date: date
    duration_months: int
    premium: float  # monthly cost
    insured_value: float
    name: str = ""
    type: InsuranceType = InsuranceType.LIFE


@dataclass(frozen=True)
class Client:
    id: int
    name: str
    birth_date: date


@dataclass(frozen=True)
class SimulationSnapshot:
    start_date: date
    real_rate: float
    assets: Tuple[Asset, ...] = ()
    movements: Tuple[Movement, ...] = ()
    insurances: Tuple[Insurance, ...] = ()
    id: int = 0
    name: str = ""
    client: Optional[Client] = None

    @property
    def start_year(self) -> int:
        return self.start_date.year

    @property
    def financed_assets(self) -> Tuple[Asset, ...]:
        return tuple(asset for asset in self.assets if asset.financing is not None)


@dataclass(frozen=True)
class ProjectionYear:
    year: int
    financial_assets: float
    real_estate_assets: float
    total_patrimony: float
    total_patrimony_without_insurance: float
    total_income: float
    total_expenses: float  # base expenses + insurance premiums + financing payments
    net_result: float
    insurance_value: float


@dataclass(frozen=True)
class ProjectionResult:
    simulation_id: int
    simulation_name: str
    status: LifeStatus
    start_year: int
    end_year: int
    real_rate: float
    projections: Tuple[ProjectionYear, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ProjectionStats:
    final_patrimony: float
    retirement_age: Optional[int]
