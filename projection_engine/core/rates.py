"""Static conversion rates behind a single lookup interface.

None of these are live prices. They stand in for a market data feed, and any
result that uses them is flagged as an estimate. Swapping in a real feed
means passing a different RateProvider; the fee formula does not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Protocol

from projection_engine.domain.exceptions import RateLookupError


class RateProvider(Protocol):
    def lookup_rate(self, key: str) -> float: ...


@dataclass(frozen=True)
class Network:
    key: str
    native_symbol: str
    unit_divisor: float
    unit_name: str


NETWORKS: Dict[str, Network] = {
    "ethereum": Network("ethereum", "ETH", 1_000_000_000, "Gwei"),
    "polygon": Network("polygon", "MATIC", 1_000_000_000, "Gwei"),
    "solana": Network("solana", "SOL", 1_000_000_000, "lamports"),
    # gas units are vBytes and gas price is sat/vByte
    "bitcoin": Network("bitcoin", "BTC", 100_000_000, "sat/vB"),
}

# native token -> USD
NETWORK_USD_RATES: Dict[str, float] = {
    "ethereum": 2000.0,
    "bitcoin": 30000.0,
    "polygon": 0.8,
    "solana": 20.0,
}

# USD -> display currency
USD_FIAT_RATES: Dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "INR": 83.0,
    "JPY": 150.0,
    "AUD": 1.52,
    "CAD": 1.36,
    "CHF": 0.88,
    "CNY": 7.2,
}


def network_rate_key(network: str) -> str:
    return f"{network}:USD"


def fiat_rate_key(currency: str) -> str:
    return f"USD:{currency.upper()}"


class StaticRateTable:
    """RateProvider backed by an in-memory mapping."""

    def __init__(self, rates: Optional[Mapping[str, float]] = None):
        self._rates: Dict[str, float] = dict(rates if rates is not None else default_rates())

    def lookup_rate(self, key: str) -> float:
        try:
            return self._rates[key]
        except KeyError:
            raise RateLookupError(f"No rate available for {key!r}") from None

    def keys(self):
        return self._rates.keys()


def default_rates() -> Dict[str, float]:
    rates = {network_rate_key(network): rate for network, rate in NETWORK_USD_RATES.items()}
    rates.update({fiat_rate_key(code): rate for code, rate in USD_FIAT_RATES.items()})
    return rates


DEFAULT_RATES = StaticRateTable()
