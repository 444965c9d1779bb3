"""Data contracts for calculator results.

Every numeric field is already rounded by the time a model is built; see
core/rounding.py.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CompoundInterestRow(BaseModel):
    """One year of a compound-interest breakdown."""

    model_config = ConfigDict(extra="forbid")

    year: int = Field(..., ge=1)
    openingValue: float
    value: float
    interestEarned: float


class CompoundInterestResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    principal: float
    futureValue: float
    totalInterest: float
    annualBreakdown: List[CompoundInterestRow]


class RoiResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    initialInvestment: float
    currentValue: float
    profitLoss: float
    roiPercentage: float


class IcoIdoRoiResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    investmentAmount: float
    currentValue: float
    profitLoss: float
    roiPercentage: float


class DividendYieldResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    dividendYield: float


class CryptoTaxResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    totalGains: float
    estimatedTax: float
    netGainsAfterTax: float


class SipVsLumpsumResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    totalInvested: float
    monthlyInstallment: float
    lumpsumFutureValue: float
    sipFutureValue: float
    difference: float = Field(..., description="Lumpsum minus SIP future value.")


class RetirementCorpusResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    yearsToRetirement: int
    annualExpenses: float
    realReturnRate: float = Field(..., description="Real return as a percentage.")
    requiredCorpus: float
    totalNominalExpenses: float


class MarketTimingRow(BaseModel):
    """One year of the fully-invested vs. best-days-missed comparison."""

    model_config = ConfigDict(extra="forbid")

    year: int = Field(..., ge=1)
    investedValue: float
    missedValue: float
    opportunityCost: float


class MarketTimingResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    valueIfInvested: float
    valueIfBestDaysMissed: float
    opportunityCost: float
    annualBreakdown: List[MarketTimingRow]


class BlockchainFeeResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    network: str
    nativeSymbol: str
    estimatedFee: float = Field(..., description="Fee in the network's native token.")
    estimatedFeeUsd: float
    estimatedFeeFiat: float
    currency: str
    isEstimate: bool = True
    disclaimer: str
