"""Blockchain transaction fee estimate."""

from __future__ import annotations

from typing import Optional

from projection_engine.core.rates import (
    DEFAULT_RATES,
    NETWORKS,
    RateProvider,
    fiat_rate_key,
    network_rate_key,
)
from projection_engine.core.rounding import round_money, round_token
from projection_engine.schemas.results import BlockchainFeeResult

FEE_DISCLAIMER = (
    "Estimate only: uses static placeholder token and currency rates, "
    "not live network or market data."
)


def blockchain_fee(
    gas_units: float,
    gas_price: float,
    network: str,
    currency: str = "USD",
    rates: Optional[RateProvider] = None,
) -> BlockchainFeeResult:
    """
    fee (native) = gas_units * gas_price / unit divisor
    fee (USD)    = fee (native) * token->USD rate
    fee (fiat)   = fee (USD) * USD->currency rate

    The unit divisor is 1e9 for Gwei/lamport priced networks and 1e8 for the
    Bitcoin sat/vByte model. Rates come from the given provider.
    """
    rates = rates or DEFAULT_RATES
    meta = NETWORKS[network]

    fee_native = gas_units * gas_price / meta.unit_divisor
    fee_usd = fee_native * rates.lookup_rate(network_rate_key(network))
    fee_fiat = fee_usd * rates.lookup_rate(fiat_rate_key(currency))

    return BlockchainFeeResult(
        network=network,
        nativeSymbol=meta.native_symbol,
        estimatedFee=round_token(fee_native),
        estimatedFeeUsd=round_money(fee_usd),
        estimatedFeeFiat=round_money(fee_fiat),
        currency=currency.upper(),
        isEstimate=True,
        disclaimer=FEE_DISCLAIMER,
    )
