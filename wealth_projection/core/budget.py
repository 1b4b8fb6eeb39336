from __future__ import annotations

from typing import Iterable

from .inputs import Frequency, LifeStatus, Movement, MovementType

# household costs keep running at half rate after a death in the family
DEAD_EXPENSE_FACTOR = 0.5


def _income_allowed(movement: Movement, status: LifeStatus) -> bool:
    if movement.type is not MovementType.INCOME:
        return True
    if status is LifeStatus.DEAD:
        return False
    if status is LifeStatus.INVALID:
        return not movement.is_work_income
    return True


def _annualised_value(movement: Movement, year: int) -> float:
    """Normalise the movement value to a single year's amount."""
    if movement.frequency is Frequency.MONTHLY:
        return float(movement.value) * 12
    if movement.frequency is Frequency.YEARLY:
        return float(movement.value)
    if movement.frequency is Frequency.ONCE:
        return float(movement.value) if year == movement.first_year else 0.0
    raise ValueError(f"Unsupported movement frequency {movement.frequency!r}.")


def movement_value_for_year(movement: Movement, year: int, status: LifeStatus, end_year: int) -> float:
    """Unsigned cash-flow contribution of one movement in ``year`` under ``status``."""
    if year < movement.first_year or year > movement.last_year(end_year):
        return 0.0
    if not _income_allowed(movement, status):
        return 0.0

    value = _annualised_value(movement, year)

    if status is LifeStatus.DEAD and movement.type is MovementType.EXPENSE:
        value *= DEAD_EXPENSE_FACTOR
    return value


def _yearly_total(
    movements: Iterable[Movement], movement_type: MovementType, year: int, status: LifeStatus, end_year: int
) -> float:
    return sum(
        (movement_value_for_year(m, year, status, end_year) for m in movements if m.type is movement_type),
        0.0,
    )


def yearly_income(movements: Iterable[Movement], year: int, status: LifeStatus, end_year: int) -> float:
    return _yearly_total(movements, MovementType.INCOME, year, status, end_year)


def yearly_expenses(movements: Iterable[Movement], year: int, status: LifeStatus, end_year: int) -> float:
    return _yearly_total(movements, MovementType.EXPENSE, year, status, end_year)
