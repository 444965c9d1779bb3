"""Single-step return calculators: ROI, ICO/IDO ROI, dividend yield, crypto tax."""

from __future__ import annotations

from projection_engine.core.rounding import round_money, round_percent, to_fraction
from projection_engine.schemas.results import (
    CryptoTaxResult,
    DividendYieldResult,
    IcoIdoRoiResult,
    RoiResult,
)


def roi_fraction(initial: float, current: float) -> float:
    """(current - initial) / initial, or 0 when nothing was invested."""
    if initial == 0:
        return 0.0
    return (current - initial) / initial


def simple_roi(initial_investment: float, current_value: float) -> RoiResult:
    profit_loss = current_value - initial_investment
    return RoiResult(
        initialInvestment=round_money(initial_investment),
        currentValue=round_money(current_value),
        profitLoss=round_money(profit_loss),
        roiPercentage=round_percent(roi_fraction(initial_investment, current_value)),
    )


def ico_ido_roi(
    investment_amount: float,
    tokens_received: float,
    current_token_price: float,
) -> IcoIdoRoiResult:
    """Value the token allocation at today's price, then apply simple ROI."""
    current_value = tokens_received * current_token_price
    return IcoIdoRoiResult(
        investmentAmount=round_money(investment_amount),
        currentValue=round_money(current_value),
        profitLoss=round_money(current_value - investment_amount),
        roiPercentage=round_percent(roi_fraction(investment_amount, current_value)),
    )


def dividend_yield(annual_dividend_per_share: float, market_price: float) -> DividendYieldResult:
    # market_price > 0 is enforced by the input schema
    return DividendYieldResult(
        dividendYield=round_percent(annual_dividend_per_share / market_price),
    )


def crypto_tax(total_gains: float, tax_rate: float) -> CryptoTaxResult:
    """Flat-rate estimate; no brackets, holding periods or jurisdictions."""
    tax = total_gains * to_fraction(tax_rate)
    return CryptoTaxResult(
        totalGains=round_money(total_gains),
        estimatedTax=round_money(tax),
        netGainsAfterTax=round_money(total_gains - tax),
    )
