"""Multi-year growth calculators: compound interest, SIP vs. lumpsum, market timing."""

from __future__ import annotations

import math
from typing import Tuple

from projection_engine.core.rounding import round_money, to_fraction
from projection_engine.core.series import chained_series, independent_series
from projection_engine.schemas.results import (
    CompoundInterestResult,
    CompoundInterestRow,
    MarketTimingResult,
    MarketTimingRow,
    SipVsLumpsumResult,
)

COMPOUNDING_FREQUENCIES = (1, 2, 4, 12)


def compound_interest(
    principal: float,
    rate: float,
    years: int,
    frequency: int,
) -> CompoundInterestResult:
    """
    FV = P * (1 + r/n)^(n*t), with a year-by-year breakdown.

    The breakdown is a chained recurrence: each year's closing value is the
    next year's opening value, grown by one year of compounding
    (1 + r/n)^n. Values stay unrounded while chaining; only emitted rows are
    rounded.
    """
    r = to_fraction(rate)
    n = frequency

    future_value = principal * (1 + r / n) ** (n * years)
    yearly_factor = (1 + r / n) ** n

    def step(year: int, opening: float) -> Tuple[CompoundInterestRow, float]:
        closing = opening * yearly_factor
        row = CompoundInterestRow(
            year=year,
            openingValue=round_money(opening),
            value=round_money(closing),
            interestEarned=round_money(closing - opening),
        )
        return row, closing

    breakdown = chained_series(years, float(principal), step)

    return CompoundInterestResult(
        principal=round_money(principal),
        futureValue=round_money(future_value),
        totalInterest=round_money(future_value - principal),
        annualBreakdown=breakdown,
    )


def sip_vs_lumpsum(
    total_investment: float,
    annual_rate: float,
    years: int,
) -> SipVsLumpsumResult:
    """
    Compare investing the same total capital P two ways.

      Lumpsum: all of P at once, compounded annually -> P * (1 + r)^t
      SIP:     P split into n = 12t monthly installments of P/n, compounded
               monthly at i = r/12, paid at the start of each month:
               (P/n) * [((1 + i)^n - 1) / i] * (1 + i)

    With i == 0 the annuity factor degenerates to n, so the SIP value is just
    the capital paid in (P). For tiny positive i the factor goes through
    expm1/log1p, since (1 + i)^n - 1 cancels to 0 once 1 + i rounds to 1.
    """
    r = to_fraction(annual_rate)
    months = years * 12
    i = r / 12
    installment = total_investment / months

    lumpsum_fv = total_investment * (1 + r) ** years

    if i == 0:
        sip_fv = float(total_investment)
    else:
        sip_fv = installment * (math.expm1(months * math.log1p(i)) / i) * (1 + i)

    return SipVsLumpsumResult(
        totalInvested=round_money(total_investment),
        monthlyInstallment=round_money(installment),
        lumpsumFutureValue=round_money(lumpsum_fv),
        sipFutureValue=round_money(sip_fv),
        difference=round_money(lumpsum_fv - sip_fv),
    )


def market_timing_cost(
    initial_investment: float,
    market_return: float,
    missed_return: float,
    years: int,
) -> MarketTimingResult:
    """
    Opportunity cost of missing the market's best days.

    Each year k is computed directly from the initial principal,
    P * (1 + r)^k, for both paths. Rows do not chain. Totals are the last
    row.
    """
    r_market = to_fraction(market_return)
    r_missed = to_fraction(missed_return)

    def step(year: int) -> MarketTimingRow:
        invested = initial_investment * (1 + r_market) ** year
        missed = initial_investment * (1 + r_missed) ** year
        return MarketTimingRow(
            year=year,
            investedValue=round_money(invested),
            missedValue=round_money(missed),
            opportunityCost=round_money(invested - missed),
        )

    breakdown = independent_series(years, step)
    last = breakdown[-1]

    return MarketTimingResult(
        valueIfInvested=last.investedValue,
        valueIfBestDaysMissed=last.missedValue,
        opportunityCost=last.opportunityCost,
        annualBreakdown=breakdown,
    )
