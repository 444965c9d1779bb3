"""Calculator registry: metadata, input schema and compute function per slug."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel

from projection_engine.core.fees import blockchain_fee
from projection_engine.core.growth import compound_interest, market_timing_cost, sip_vs_lumpsum
from projection_engine.core.rates import RateProvider
from projection_engine.core.retirement import retirement_corpus
from projection_engine.core.returns import crypto_tax, dividend_yield, ico_ido_roi, simple_roi
from projection_engine.domain.exceptions import InputValidationError, UnknownCalculatorError
from projection_engine.domain.validation import InputSchema, validate
from projection_engine.observability.logging import log_calculation
from projection_engine.presentation.adapter import PresentedResult, present
from projection_engine.presentation.currency import get_currency
from projection_engine.schemas import inputs

CATEGORIES = (
    "Stock Market",
    "Crypto",
    "Mutual Funds & SIP",
    "Retirement Planning",
    "Advanced Tools",
)


@dataclass(frozen=True)
class ComputeContext:
    """Per-call options that are not calculator input fields."""

    currency: str = "USD"
    rates: Optional[RateProvider] = None


Compute = Callable[[Any, ComputeContext], BaseModel]


@dataclass(frozen=True)
class CalculatorDefinition:
    slug: str
    name: str
    category: str
    description: str
    schema: InputSchema
    compute: Compute
    keywords: Tuple[str, ...] = field(default_factory=tuple)

    def metadata(self) -> Dict[str, Any]:
        return {
            "id": self.slug,
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "keywords": list(self.keywords),
            "path": f"/calculators/{self.slug}",
        }


CALCULATORS: List[CalculatorDefinition] = [
    CalculatorDefinition(
        slug="compound-interest",
        name="Compound Interest Calculator",
        category="Stock Market",
        description="Project future value of investments with compounding.",
        keywords=("compound interest", "investment growth", "finance"),
        schema=inputs.COMPOUND_INTEREST,
        compute=lambda data, ctx: compound_interest(
            principal=data.principal,
            rate=data.rate,
            years=data.time,
            frequency=data.compoundingFrequency,
        ),
    ),
    CalculatorDefinition(
        slug="dividend-yield",
        name="Dividend Yield Calculator",
        category="Stock Market",
        description="Determine the dividend yield of a stock.",
        keywords=("dividend yield", "stock dividend", "passive income"),
        schema=inputs.DIVIDEND_YIELD,
        compute=lambda data, ctx: dividend_yield(
            annual_dividend_per_share=data.annualDividendPerShare,
            market_price=data.currentMarketPrice,
        ),
    ),
    CalculatorDefinition(
        slug="bitcoin-roi",
        name="Bitcoin ROI Calculator",
        category="Crypto",
        description="Calculate Return on Investment for Bitcoin.",
        keywords=("bitcoin roi", "crypto return", "btc investment"),
        schema=inputs.BITCOIN_ROI,
        compute=lambda data, ctx: simple_roi(
            initial_investment=data.initialInvestment,
            current_value=data.currentValue,
        ),
    ),
    CalculatorDefinition(
        slug="blockchain-fee",
        name="Blockchain Fee Calculator",
        category="Crypto",
        description="Estimate blockchain transaction fees.",
        keywords=("blockchain fees", "crypto transaction cost", "gas fees"),
        schema=inputs.BLOCKCHAIN_FEE,
        compute=lambda data, ctx: blockchain_fee(
            gas_units=data.gasUnits,
            gas_price=data.gasPrice,
            network=data.network,
            currency=ctx.currency,
            rates=ctx.rates,
        ),
    ),
    CalculatorDefinition(
        slug="crypto-tax",
        name="Crypto Tax Calculator",
        category="Crypto",
        description="Estimate potential taxes on crypto gains.",
        keywords=("crypto tax", "bitcoin tax", "cryptocurrency capital gains"),
        schema=inputs.CRYPTO_TAX,
        compute=lambda data, ctx: crypto_tax(
            total_gains=data.totalGains,
            tax_rate=data.taxRate,
        ),
    ),
    CalculatorDefinition(
        slug="ico-ido-roi",
        name="ICO/IDO ROI Calculator",
        category="Crypto",
        description="Calculate ROI for ICO/IDO investments.",
        keywords=("ico roi", "ido return", "crypto launchpad"),
        schema=inputs.ICO_IDO_ROI,
        compute=lambda data, ctx: ico_ido_roi(
            investment_amount=data.investmentAmount,
            tokens_received=data.tokensReceived,
            current_token_price=data.currentTokenPrice,
        ),
    ),
    CalculatorDefinition(
        slug="sip-vs-lumpsum",
        name="SIP vs Lumpsum Calculator",
        category="Mutual Funds & SIP",
        description="Compare SIP and lumpsum investment strategies.",
        keywords=("sip vs lumpsum", "investment comparison", "mutual fund strategy"),
        schema=inputs.SIP_VS_LUMPSUM,
        compute=lambda data, ctx: sip_vs_lumpsum(
            total_investment=data.totalInvestment,
            annual_rate=data.expectedReturnRate,
            years=data.investmentPeriodYears,
        ),
    ),
    CalculatorDefinition(
        slug="retirement-corpus",
        name="Retirement Corpus Calculator",
        category="Retirement Planning",
        description="Estimate the corpus needed for retirement.",
        keywords=("retirement corpus", "pension planning", "retirement fund"),
        schema=inputs.RETIREMENT_CORPUS,
        compute=lambda data, ctx: retirement_corpus(
            current_age=data.currentAge,
            retirement_age=data.retirementAge,
            monthly_expenses=data.monthlyExpensesAtRetirement,
            years_in_retirement=data.lifeExpectancyPostRetirement,
            inflation_rate=data.expectedInflationRate,
            post_retirement_return=data.expectedReturnRatePostRetirement,
        ),
    ),
    CalculatorDefinition(
        slug="market-timing-cost",
        name="Market Timing Cost Calculator",
        category="Advanced Tools",
        description="Understand the cost of trying to time the market.",
        keywords=("market timing", "investment strategy", "missed opportunity cost"),
        schema=inputs.MARKET_TIMING_COST,
        compute=lambda data, ctx: market_timing_cost(
            initial_investment=data.initialInvestment,
            market_return=data.averageMarketReturn,
            missed_return=data.returnIfBestDaysMissed,
            years=data.periodYears,
        ),
    ),
]

_BY_SLUG: Dict[str, CalculatorDefinition] = {calc.slug: calc for calc in CALCULATORS}


def list_calculators(category: Optional[str] = None) -> List[CalculatorDefinition]:
    if category is None:
        return list(CALCULATORS)
    return [calc for calc in CALCULATORS if calc.category == category]


def get_calculator(slug: str) -> CalculatorDefinition:
    try:
        return _BY_SLUG[slug]
    except KeyError:
        raise UnknownCalculatorError(f"Unknown calculator: {slug!r}") from None


def compute(slug: str, raw: Any, context: Optional[ComputeContext] = None) -> BaseModel:
    """Validate raw input and run the calculator's formula."""
    calculator = get_calculator(slug)
    validated = validate(raw, calculator.schema)
    return calculator.compute(validated, context or ComputeContext())


def run_calculator(
    slug: str,
    raw: Any,
    currency: str = "USD",
    rates: Optional[RateProvider] = None,
) -> PresentedResult:
    """
    Full pipeline for one call: validate -> compute -> present.

    The calculator and then the currency tag are resolved first, so an
    unknown slug is reported ahead of a bad currency code and neither does
    any work.
    Each call is independent; nothing is cached between calls.
    """
    get_calculator(slug)
    tag = get_currency(currency)
    started = time.perf_counter()
    try:
        result = compute(slug, raw, ComputeContext(currency=tag.code, rates=rates))
    except InputValidationError as exc:
        log_calculation(slug, (time.perf_counter() - started) * 1000, ok=False, fields=exc.fields)
        raise

    log_calculation(slug, (time.perf_counter() - started) * 1000, ok=True)
    return present(slug, result, tag)
