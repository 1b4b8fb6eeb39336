"""Conversion between API-shaped (camelCase) payloads and engine records."""

from __future__ import annotations

from dataclasses import fields
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional

from dateutil.parser import isoparse

from wealth_projection.exceptions import InvalidProjectionRequestError

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
    ProjectionResult,
    ProjectionYear,
    SimulationSnapshot,
)


def _date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return isoparse(str(value)).date()
    except ValueError:
        raise InvalidProjectionRequestError(f"Invalid date {value!r}.") from None


def _optional_date(value: Any) -> Optional[date]:
    return None if value in (None, "") else _date(value)


def _enum(enum_cls: type, value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidProjectionRequestError(f"Invalid {enum_cls.__name__} {value!r}.") from None


def _record(payload: Dict[str, Any]) -> AssetRecord:
    return AssetRecord(value=float(payload["value"]), date=_date(payload["date"]), id=payload.get("id"))


def _financing(payload: Optional[Dict[str, Any]]) -> Optional[Financing]:
    if not payload:
        return None
    return Financing(
        start_date=_date(payload["startDate"]),
        installments=int(payload["installments"]),
        interest_rate=float(payload["interestRate"]),
        down_payment=float(payload.get("downPayment", 0.0)),
    )


def _asset(payload: Dict[str, Any]) -> Asset:
    return Asset(
        id=int(payload["id"]),
        name=payload.get("name", ""),
        type=_enum(AssetType, payload["type"]),
        records=tuple(_record(r) for r in payload.get("records") or ()),
        financing=_financing(payload.get("financing")),
    )


def _movement(payload: Dict[str, Any]) -> Movement:
    category = payload.get("category")
    return Movement(
        id=int(payload["id"]),
        name=payload.get("name", ""),
        type=_enum(MovementType, payload["type"]),
        category=_enum(IncomeCategory, category) if category else None,
        value=float(payload["value"]),
        frequency=_enum(Frequency, payload["frequency"]),
        start_date=_date(payload["startDate"]),
        end_date=_optional_date(payload.get("endDate")),
    )


def _insurance(payload: Dict[str, Any]) -> Insurance:
    return Insurance(
        id=int(payload["id"]),
        name=payload.get("name", ""),
        type=_enum(InsuranceType, payload.get("type", InsuranceType.LIFE.value)),
        start_date=_date(payload["startDate"]),
        duration_months=int(payload["durationMonths"]),
        premium=float(payload["premium"]),
        insured_value=float(payload["insuredValue"]),
    )


def _client(payload: Optional[Dict[str, Any]]) -> Optional[Client]:
    if not payload:
        return None
    return Client(id=int(payload["id"]), name=payload.get("name", ""), birth_date=_date(payload["birthDate"]))


def snapshot_from_dict(payload: Dict[str, Any]) -> SimulationSnapshot:
    """Build a hydrated simulation from its JSON representation."""
    try:
        return SimulationSnapshot(
            id=int(payload.get("id", 0)),
            name=payload.get("name", ""),
            start_date=_date(payload["startDate"]),
            real_rate=float(payload["realRate"]),
            assets=tuple(_asset(a) for a in payload.get("assets") or ()),
            movements=tuple(_movement(m) for m in payload.get("movements") or ()),
            insurances=tuple(_insurance(i) for i in payload.get("insurances") or ()),
            client=_client(payload.get("client")),
        )
    except InvalidProjectionRequestError:
        raise
    except KeyError as exc:
        raise InvalidProjectionRequestError(f"Missing field {exc.args[0]!r} in simulation payload.") from None
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidProjectionRequestError(f"Malformed simulation payload: {exc}") from None


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    return value


def _year_to_dict(year: ProjectionYear) -> Dict[str, Any]:
    return {_camel(f.name): _serialize_value(getattr(year, f.name)) for f in fields(year)}


def result_to_dict(result: ProjectionResult) -> Dict[str, Any]:
    payload = {
        _camel(f.name): _serialize_value(getattr(result, f.name)) for f in fields(result) if f.name != "projections"
    }
    payload["projections"] = [_year_to_dict(year) for year in result.projections]
    return payload
