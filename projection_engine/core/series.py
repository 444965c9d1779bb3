"""Per-period series generation for the multi-year calculators.

Two step disciplines are kept as separate functions:

  chained_series      each period's output state seeds the next period
                      (compound-interest breakdown)
  independent_series  each period is computed fresh from fixed inputs
                      (market-timing breakdown)

Swapping one for the other changes results, so formulas pick one explicitly.
"""

from __future__ import annotations

from typing import Callable, List, Tuple, TypeVar

Row = TypeVar("Row")
State = TypeVar("State")


def _check_horizon(horizon: int) -> None:
    if horizon < 1:
        raise ValueError(f"horizon must be at least 1, got {horizon}")


def chained_series(
    horizon: int,
    seed: State,
    step: Callable[[int, State], Tuple[Row, State]],
) -> List[Row]:
    """Return rows for periods 1..horizon, threading state between periods."""
    _check_horizon(horizon)

    rows: List[Row] = []
    state = seed
    for period in range(1, horizon + 1):
        row, state = step(period, state)
        rows.append(row)
    return rows


def independent_series(horizon: int, step: Callable[[int], Row]) -> List[Row]:
    """Return rows for periods 1..horizon; no state flows between periods."""
    _check_horizon(horizon)
    return [step(period) for period in range(1, horizon + 1)]
