from __future__ import annotations

from typing import Any, Optional

from wealth_projection.config import ProjectionSettings
from wealth_projection.core.inputs import (
    Asset,
    Insurance,
    LifeStatus,
    Movement,
    SimulationSnapshot,
)
from wealth_projection.exceptions import InvalidProjectionRequestError


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidProjectionRequestError(message)


def validate_status(status: Any) -> LifeStatus:
    try:
        return LifeStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in LifeStatus)
        raise InvalidProjectionRequestError(f"Status must be one of {allowed}.") from None


def validate_end_year(end_year: Any, settings: ProjectionSettings) -> int:
    _require(isinstance(end_year, int) and not isinstance(end_year, bool), "End year must be an integer.")
    _require(
        settings.min_end_year <= end_year <= settings.max_end_year,
        f"End year must be between {settings.min_end_year} and {settings.max_end_year}.",
    )
    return end_year


def validate_projection_request(
    status: Any, end_year: Any, settings: Optional[ProjectionSettings] = None
) -> tuple[LifeStatus, int]:
    settings = settings or ProjectionSettings()
    return validate_status(status), validate_end_year(end_year, settings)


def validate_asset(asset: Asset) -> None:
    if asset.financing is not None:
        _require(asset.financing.installments > 0, f"Asset {asset.id}: installments must be positive.")
        _require(asset.financing.interest_rate >= 0, f"Asset {asset.id}: interest rate cannot be negative.")
        _require(asset.financing.down_payment >= 0, f"Asset {asset.id}: down payment cannot be negative.")


def validate_movement(movement: Movement) -> None:
    _require(movement.value >= 0, f"Movement {movement.id}: value cannot be negative.")
    _require(
        movement.end_date is None or movement.end_date >= movement.start_date,
        f"Movement {movement.id}: end date precedes start date.",
    )


def validate_insurance(insurance: Insurance) -> None:
    _require(insurance.duration_months > 0, f"Insurance {insurance.id}: duration must be positive.")
    _require(insurance.premium >= 0, f"Insurance {insurance.id}: premium cannot be negative.")
    _require(insurance.insured_value >= 0, f"Insurance {insurance.id}: insured value cannot be negative.")


def validate_snapshot(simulation: SimulationSnapshot) -> None:
    """Upstream checks on caller-supplied records. The engine itself never validates."""
    for asset in simulation.assets:
        validate_asset(asset)
    for movement in simulation.movements:
        validate_movement(movement)
    for insurance in simulation.insurances:
        validate_insurance(insurance)
