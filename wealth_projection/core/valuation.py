from __future__ import annotations

from datetime import date
from typing import Iterable, Tuple

from .inputs import Asset, AssetType

_BUCKETS = {
    AssetType.FINANCIAL: "financial",
    AssetType.REAL_ESTATE: "real_estate",
}


def value_at(asset: Asset, on: date) -> float:
    """Latest recorded value with a date on or before ``on``; 0 when the asset has none yet."""
    best = None
    best_key = None
    for position, record in enumerate(asset.records):
        if record.date > on:
            continue
        # same-day duplicates: highest id, then the later entry, wins
        key = (record.date, record.id if record.id is not None else -1, position)
        if best_key is None or key > best_key:
            best, best_key = record, key
    return float(best.value) if best is not None else 0.0


def bucket_for(asset_type: AssetType) -> str:
    try:
        return _BUCKETS[asset_type]
    except KeyError:
        raise ValueError(f"No patrimony bucket for asset type {asset_type!r}.") from None


def assets_by_type(assets: Iterable[Asset], on: date) -> Tuple[float, float]:
    """Return (financial, real_estate) totals valued at ``on``."""
    totals = {"financial": 0.0, "real_estate": 0.0}
    for asset in assets:
        totals[bucket_for(asset.type)] += value_at(asset, on)
    return totals["financial"], totals["real_estate"]
