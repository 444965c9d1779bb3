"""Map calculator results onto display strings and chart shapes."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from projection_engine.presentation.charts import (
    CategoryChart,
    LineChart,
    category_series,
    line_series,
)
from projection_engine.presentation.currency import (
    CurrencyTag,
    format_money,
    format_percent,
    get_currency,
)

PERCENT_FIELDS = {"roiPercentage", "dividendYield", "realReturnRate"}
# not money amounts, shown as-is
PLAIN_FIELDS = {"yearsToRetirement", "network", "nativeSymbol", "currency", "isEstimate", "disclaimer"}

Chart = Union[LineChart, CategoryChart]


class PresentedResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    calculator: str
    currency: CurrencyTag
    values: Dict[str, Any]
    display: Dict[str, str]
    chart: Optional[Chart] = None
    isEstimate: bool = False
    disclaimer: Optional[str] = None


def _compound_interest_chart(result: Any) -> Chart:
    return line_series(
        result.annualBreakdown,
        "year",
        {"value": "Value", "interestEarned": "Interest earned"},
    )


def _market_timing_chart(result: Any) -> Chart:
    return line_series(
        result.annualBreakdown,
        "year",
        {
            "investedValue": "Fully invested",
            "missedValue": "Missed best days",
            "opportunityCost": "Opportunity cost",
        },
    )


def _roi_chart(result: Any) -> Chart:
    initial = getattr(result, "initialInvestment", None)
    if initial is None:
        initial = result.investmentAmount
    return category_series([("Invested", initial), ("Current value", result.currentValue)])


def _sip_chart(result: Any) -> Chart:
    return category_series(
        [
            ("Total invested", result.totalInvested),
            ("Lumpsum", result.lumpsumFutureValue),
            ("SIP", result.sipFutureValue),
        ]
    )


def _tax_chart(result: Any) -> Chart:
    return category_series([("Net gains", result.netGainsAfterTax), ("Tax", result.estimatedTax)])


def _retirement_chart(result: Any) -> Chart:
    return category_series(
        [
            ("Required corpus", result.requiredCorpus),
            ("Total nominal expenses", result.totalNominalExpenses),
        ]
    )


CHART_BUILDERS: Dict[str, Callable[[Any], Chart]] = {
    "compound-interest": _compound_interest_chart,
    "market-timing-cost": _market_timing_chart,
    "bitcoin-roi": _roi_chart,
    "ico-ido-roi": _roi_chart,
    "sip-vs-lumpsum": _sip_chart,
    "crypto-tax": _tax_chart,
    "retirement-corpus": _retirement_chart,
}


def _display_value(field: str, value: Any, currency: CurrencyTag) -> Optional[str]:
    if isinstance(value, (list, dict)) or value is None:
        return None
    if field in PLAIN_FIELDS or isinstance(value, bool):
        return str(value)
    if field in PERCENT_FIELDS:
        return format_percent(value)
    if field == "estimatedFee":
        return f"{value:.8f}"
    if field == "estimatedFeeUsd":
        return format_money(value, get_currency("USD"))
    return format_money(value, currency)


def present(slug: str, result: BaseModel, currency: CurrencyTag) -> PresentedResult:
    """
    Attach a currency tag to a result.

    `values` are the result's own rounded numbers, unchanged. `display`
    holds a labelled string for each scalar. The currency only changes
    labels; the amounts are not converted. The one exception is the fee
    estimate, which computes its fiat amount itself.
    """
    values = result.model_dump()
    display: Dict[str, str] = {}
    for field, value in values.items():
        text = _display_value(field, value, currency)
        if text is not None:
            display[field] = text

    if "estimatedFee" in values:
        display["estimatedFee"] = f"{values['estimatedFee']:.8f} {values['nativeSymbol']}"

    builder = CHART_BUILDERS.get(slug)
    return PresentedResult(
        calculator=slug,
        currency=currency,
        values=values,
        display=display,
        chart=builder(result) if builder else None,
        isEstimate=bool(values.get("isEstimate", False)),
        disclaimer=values.get("disclaimer"),
    )
