from __future__ import annotations

from typing import Iterable

import pandas as pd
from dateutil.relativedelta import relativedelta

from .inputs import Asset, Financing
from .valuation import value_at


def monthly_payment(principal: float, annual_rate: float, term_months: int) -> float:
    monthly_rate = annual_rate / 12.0
    if term_months <= 0:
        return 0.0
    if monthly_rate == 0:
        return principal / term_months
    factor = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * factor / (factor - 1)


def financed_principal(asset: Asset) -> float:
    """Asset value at the loan start minus the down payment. May be negative."""
    if asset.financing is None:
        return 0.0
    return value_at(asset, asset.financing.start_date) - asset.financing.down_payment


def installments_in_year(financing: Financing, year: int) -> int:
    """Number of monthly installments due in ``year``."""
    # month offsets counted from January of the loan start year
    first = financing.start_month_index
    last = first + financing.installments - 1
    year_offset = (year - financing.start_date.year) * 12
    return max(0, min(last, year_offset + 11) - max(first, year_offset) + 1)


def financing_payments_for_year(asset: Asset, year: int) -> float:
    financing = asset.financing
    if financing is None:
        return 0.0
    payments = installments_in_year(financing, year)
    if payments == 0:
        return 0.0
    payment = monthly_payment(financed_principal(asset), financing.interest_rate, financing.installments)
    return payment * payments


def yearly_financing_payments(assets: Iterable[Asset], year: int) -> float:
    return sum((financing_payments_for_year(asset, year) for asset in assets), 0.0)


def amortization_schedule(asset: Asset) -> pd.DataFrame:
    columns = ["due_date", "payment", "interest", "principal", "ending_balance"]
    financing = asset.financing
    if financing is None:
        return pd.DataFrame(columns=columns, index=pd.Index([], name="installment"))

    balance = financed_principal(asset)
    monthly_rate = financing.interest_rate / 12.0
    payment = monthly_payment(balance, financing.interest_rate, financing.installments)
    records = []

    for installment in range(1, financing.installments + 1):
        interest = balance * monthly_rate
        principal_paid = payment - interest
        ending_balance = balance - principal_paid
        if installment == financing.installments:
            ending_balance = 0.0

        records.append(
            {
                "installment": installment,
                "due_date": financing.start_date + relativedelta(months=installment - 1),
                "payment": payment,
                "interest": interest,
                "principal": principal_paid,
                "ending_balance": ending_balance,
            }
        )

        balance = ending_balance

    return pd.DataFrame.from_records(records).set_index("installment")
