"""Field-constraint tables for each calculator's input."""

from projection_engine.core.growth import COMPOUNDING_FREQUENCIES
from projection_engine.core.rates import NETWORKS
from projection_engine.domain.validation import CrossFieldRule, EnumField, InputSchema, RangeField, whole_number

COMPOUND_INTEREST = InputSchema(
    "compound-interest",
    [
        RangeField("principal", "Principal must be greater than 0", gt=0),
        RangeField("rate", "Interest rate must be between 0 and 100", ge=0, le=100),
        RangeField("time", "Time must be a whole number of years from 1 to 100", kind=int, ge=1, le=100),
        EnumField(
            "compoundingFrequency",
            "Compounding frequency must be one of 1, 2, 4 or 12",
            choices=COMPOUNDING_FREQUENCIES,
            coerce=whole_number,
        ),
    ],
)

BITCOIN_ROI = InputSchema(
    "bitcoin-roi",
    [
        RangeField("initialInvestment", "Initial investment must be greater than 0", gt=0),
        RangeField("currentValue", "Current value must be non-negative", ge=0),
    ],
)

ICO_IDO_ROI = InputSchema(
    "ico-ido-roi",
    [
        RangeField("investmentAmount", "Investment amount must be greater than 0", gt=0),
        RangeField("tokensReceived", "Tokens received must be positive", ge=0.000001),
        RangeField("currentTokenPrice", "Current token price must be non-negative", ge=0),
    ],
)

DIVIDEND_YIELD = InputSchema(
    "dividend-yield",
    [
        RangeField("annualDividendPerShare", "Annual dividend must be non-negative", ge=0),
        RangeField("currentMarketPrice", "Market price must be greater than 0", gt=0),
    ],
)

CRYPTO_TAX = InputSchema(
    "crypto-tax",
    [
        RangeField("totalGains", "Total gains must be non-negative", ge=0),
        RangeField("taxRate", "Tax rate must be between 0 and 100", ge=0, le=100),
    ],
)

SIP_VS_LUMPSUM = InputSchema(
    "sip-vs-lumpsum",
    [
        RangeField("totalInvestment", "Total investment must be greater than 0", gt=0),
        RangeField("expectedReturnRate", "Expected return rate must be between 0 and 100", ge=0, le=100),
        RangeField(
            "investmentPeriodYears",
            "Investment period must be a whole number of years from 1 to 50",
            kind=int,
            ge=1,
            le=50,
        ),
    ],
)

RETIREMENT_CORPUS = InputSchema(
    "retirement-corpus",
    [
        RangeField("currentAge", "Current age must be a whole number from 18 to 99", kind=int, ge=18, le=99),
        RangeField(
            "retirementAge",
            "Retirement age must be a whole number from 19 to 100",
            kind=int,
            ge=19,
            le=100,
        ),
        RangeField("monthlyExpensesAtRetirement", "Monthly expenses must be greater than 0", gt=0),
        RangeField(
            "lifeExpectancyPostRetirement",
            "Years in retirement must be a whole number from 1 to 50",
            kind=int,
            ge=1,
            le=50,
        ),
        RangeField("expectedInflationRate", "Inflation rate must be between 0 and 20", ge=0, le=20),
        RangeField(
            "expectedReturnRatePostRetirement",
            "Post-retirement return must be between 0 and 20",
            ge=0,
            le=20,
        ),
    ],
    cross_rules=[
        CrossFieldRule(
            "retirementAge",
            lambda values: values.retirementAge > values.currentAge,
            "Retirement age must be greater than current age.",
        ),
    ],
)

MARKET_TIMING_COST = InputSchema(
    "market-timing-cost",
    [
        RangeField("initialInvestment", "Initial investment must be greater than 0", gt=0),
        RangeField("averageMarketReturn", "Market return must be between -100 and 100", ge=-100, le=100),
        RangeField("returnIfBestDaysMissed", "Return must be between -100 and 100", ge=-100, le=100),
        RangeField("periodYears", "Period must be a whole number of years from 1 to 50", kind=int, ge=1, le=50),
    ],
)

BLOCKCHAIN_FEE = InputSchema(
    "blockchain-fee",
    [
        RangeField("gasUnits", "Gas units must be greater than 0", gt=0),
        RangeField("gasPrice", "Gas price must be positive", ge=0.000000001),
        EnumField(
            "network",
            "Network must be one of " + ", ".join(NETWORKS),
            choices=tuple(NETWORKS),
            coerce=lambda value: str(value).lower(),
        ),
    ],
)
