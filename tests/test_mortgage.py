"""Tests for loan payment math attached to financed assets."""

from datetime import date

import pytest

from wealth_projection.core.inputs import Asset, AssetRecord, AssetType, Financing
from wealth_projection.core.mortgage import (
    amortization_schedule,
    financed_principal,
    financing_payments_for_year,
    installments_in_year,
    monthly_payment,
    yearly_financing_payments,
)


def _financed(
    value: float = 500_000,
    down_payment: float = 100_000,
    rate: float = 0.0,
    installments: int = 12,
    start: date = date(2024, 1, 1),
) -> Asset:
    return Asset(
        id=1,
        type=AssetType.REAL_ESTATE,
        records=(AssetRecord(value=value, date=start),),
        financing=Financing(start_date=start, installments=installments, interest_rate=rate, down_payment=down_payment),
    )


class TestMonthlyPayment:
    def test_standard_amortizing_payment(self) -> None:
        assert monthly_payment(120_000, 0.06, 360) == pytest.approx(719.46, abs=0.01)

    def test_zero_rate_is_straight_line(self) -> None:
        assert monthly_payment(12_000, 0.0, 12) == 1_000

    def test_no_term(self) -> None:
        assert monthly_payment(12_000, 0.05, 0) == 0.0


class TestInstallmentsInYear:
    def test_january_start_whole_years(self) -> None:
        financing = Financing(start_date=date(2024, 1, 1), installments=12, interest_rate=0.05)

        assert installments_in_year(financing, 2024) == 12
        assert installments_in_year(financing, 2025) == 0

    def test_mid_year_start(self) -> None:
        financing = Financing(start_date=date(2024, 7, 1), installments=24, interest_rate=0.05)

        assert [installments_in_year(financing, y) for y in range(2023, 2028)] == [0, 6, 12, 6, 0]

    def test_partial_final_year(self) -> None:
        financing = Financing(start_date=date(2024, 1, 1), installments=18, interest_rate=0.05)

        assert installments_in_year(financing, 2024) == 12
        assert installments_in_year(financing, 2025) == 6

    def test_loan_inside_one_year(self) -> None:
        financing = Financing(start_date=date(2024, 3, 1), installments=4, interest_rate=0.05)

        assert installments_in_year(financing, 2024) == 4


class TestFinancingPayments:
    def test_principal_is_value_at_start_minus_down_payment(self) -> None:
        asset = Asset(
            id=1,
            type=AssetType.REAL_ESTATE,
            records=(
                AssetRecord(value=300_000, date=date(2023, 1, 1)),
                AssetRecord(value=900_000, date=date(2025, 1, 1)),
            ),
            financing=Financing(start_date=date(2024, 1, 1), installments=12, interest_rate=0.0, down_payment=60_000),
        )

        assert financed_principal(asset) == 240_000

    def test_zero_interest_payments_sum_to_principal(self) -> None:
        asset = _financed(rate=0.0, installments=12)

        total = sum(financing_payments_for_year(asset, year) for year in range(2024, 2030))

        assert financing_payments_for_year(asset, 2024) == 400_000
        assert total == pytest.approx(400_000)

    def test_interest_bearing_loan_costs_more_than_principal(self) -> None:
        asset = _financed(rate=0.12, installments=24, start=date(2024, 5, 1))

        total = sum(financing_payments_for_year(asset, year) for year in range(2024, 2030))

        assert total == pytest.approx(24 * monthly_payment(400_000, 0.12, 24))
        assert total > 400_000

    def test_negative_principal_is_not_rejected(self) -> None:
        asset = _financed(value=50_000, down_payment=100_000, installments=10)

        assert financing_payments_for_year(asset, 2024) == pytest.approx(-50_000)

    def test_unfinanced_asset_pays_nothing(self) -> None:
        asset = Asset(id=2, type=AssetType.FINANCIAL, records=(AssetRecord(value=1, date=date(2024, 1, 1)),))

        assert financing_payments_for_year(asset, 2024) == 0.0
        assert financed_principal(asset) == 0.0

    def test_sum_over_assets(self) -> None:
        assets = [_financed(rate=0.0), _financed(value=200_000, down_payment=80_000)]

        assert yearly_financing_payments(assets, 2024) == pytest.approx(520_000)


class TestAmortizationSchedule:
    def test_zero_rate_schedule(self) -> None:
        schedule = amortization_schedule(_financed(value=1_300, down_payment=100, installments=12))

        assert len(schedule) == 12
        assert schedule.index.name == "installment"
        assert (schedule["payment"] == 100).all()
        assert (schedule["interest"] == 0).all()
        assert schedule["principal"].sum() == pytest.approx(1_200)
        assert schedule["ending_balance"].iloc[-1] == 0.0
        assert schedule["due_date"].iloc[1] == date(2024, 2, 1)

    def test_interest_schedule_repays_principal(self) -> None:
        schedule = amortization_schedule(_financed(rate=0.09, installments=120))

        assert schedule["principal"].sum() == pytest.approx(400_000)
        assert schedule["interest"].iloc[0] == pytest.approx(400_000 * 0.09 / 12)
        assert schedule["ending_balance"].is_monotonic_decreasing

    def test_unfinanced_asset_has_empty_schedule(self) -> None:
        asset = Asset(id=2, type=AssetType.FINANCIAL)

        assert amortization_schedule(asset).empty
