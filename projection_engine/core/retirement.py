"""Retirement corpus estimate."""

from __future__ import annotations

import math

from projection_engine.core.rounding import round_money, round_percent, to_fraction
from projection_engine.schemas.results import RetirementCorpusResult


def real_return_rate(nominal_return: float, inflation: float) -> float:
    """Nominal minus inflation, both in percent, as a fraction."""
    return to_fraction(nominal_return - inflation)


def retirement_corpus(
    current_age: int,
    retirement_age: int,
    monthly_expenses: float,
    years_in_retirement: int,
    inflation_rate: float,
    post_retirement_return: float,
) -> RetirementCorpusResult:
    """
    Corpus needed at retirement to fund a flat annual expense for
    years_in_retirement years.

      real <= 0: annual * years   (no discounting)
      real  > 0: annual * (1 - (1 + real)^-years) / real

    totalNominalExpenses is the plain undiscounted sum, reported for
    comparison.
    """
    annual_expenses = monthly_expenses * 12
    real = real_return_rate(post_retirement_return, inflation_rate)

    if real <= 0:
        corpus = annual_expenses * years_in_retirement
    else:
        # expm1/log1p keep the factor near `years` when real is tiny but positive
        corpus = annual_expenses * -math.expm1(-years_in_retirement * math.log1p(real)) / real

    return RetirementCorpusResult(
        yearsToRetirement=retirement_age - current_age,
        annualExpenses=round_money(annual_expenses),
        realReturnRate=round_percent(real),
        requiredCorpus=round_money(corpus),
        totalNominalExpenses=round_money(annual_expenses * years_in_retirement),
    )
