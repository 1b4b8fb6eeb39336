from __future__ import annotations

from datetime import date
from typing import Iterable, Tuple

from dateutil.relativedelta import relativedelta

from .inputs import Insurance


def coverage_window(insurance: Insurance) -> Tuple[date, date]:
    """Half-open coverage interval [start, start + duration)."""
    return insurance.start_date, insurance.start_date + relativedelta(months=insurance.duration_months)


def billed_months(insurance: Insurance, year: int) -> int:
    start, end = coverage_window(insurance)
    if year < start.year or year > end.year:
        return 0

    months = 12
    if year == start.year:
        months = 12 - (start.month - 1)
    if year == end.year:
        # short policies start and end in the same year
        months = min(months, end.month)
    return months


def premium_for_year(insurance: Insurance, year: int) -> float:
    return insurance.premium * billed_months(insurance, year)


def active_value_for_year(insurance: Insurance, year: int) -> float:
    """Full insured value for any calendar year the coverage window touches."""
    start, end = coverage_window(insurance)
    if start <= date(year, 12, 31) and end > date(year, 1, 1):
        return float(insurance.insured_value)
    return 0.0


def yearly_premiums(insurances: Iterable[Insurance], year: int) -> float:
    return sum((premium_for_year(insurance, year) for insurance in insurances), 0.0)


def active_insurance_value(insurances: Iterable[Insurance], year: int) -> float:
    return sum((active_value_for_year(insurance, year) for insurance in insurances), 0.0)
