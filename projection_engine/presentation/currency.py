"""Display-only currency tags.

Tags label numbers for display. They never take part in arithmetic, and
switching currency does not convert amounts.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict

from projection_engine.domain.exceptions import UnknownCurrencyError


class CurrencyTag(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str
    label: str
    symbol: str


AVAILABLE_CURRENCIES: List[CurrencyTag] = [
    CurrencyTag(code="USD", label="USD ($)", symbol="$"),
    CurrencyTag(code="EUR", label="EUR (€)", symbol="€"),
    CurrencyTag(code="GBP", label="GBP (£)", symbol="£"),
    CurrencyTag(code="INR", label="INR (₹)", symbol="₹"),
    CurrencyTag(code="JPY", label="JPY (¥)", symbol="¥"),
    CurrencyTag(code="AUD", label="AUD (A$)", symbol="A$"),
    CurrencyTag(code="CAD", label="CAD (C$)", symbol="C$"),
    CurrencyTag(code="CHF", label="CHF (Fr)", symbol="CHF"),
    CurrencyTag(code="CNY", label="CNY (元)", symbol="元"),
]

_BY_CODE: Dict[str, CurrencyTag] = {tag.code: tag for tag in AVAILABLE_CURRENCIES}


def get_currency(code: str) -> CurrencyTag:
    try:
        return _BY_CODE[code.upper()]
    except (KeyError, AttributeError):
        raise UnknownCurrencyError(f"Unsupported currency: {code!r}") from None


def format_money(value: float, currency: CurrencyTag, places: int = 2) -> str:
    """'$1,234.56', '-€12.00'. Symbols with letters get a separating space."""
    sign = "-" if value < 0 else ""
    amount = f"{abs(value):,.{places}f}"
    separator = " " if currency.symbol.isalpha() and len(currency.symbol) > 1 else ""
    return f"{sign}{currency.symbol}{separator}{amount}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"
