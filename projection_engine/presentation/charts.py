"""Chart-ready shapes built from result rows."""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence, Tuple

from pydantic import BaseModel, ConfigDict


class Series(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key: str
    label: str
    data: List[float]


class LineChart(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: str = "line"
    categories: List[int]
    series: List[Series]


class CategoryPoint(BaseModel):
    model_config = ConfigDict(extra="forbid")

    category: str
    value: float


class CategoryChart(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: str = "bar"
    points: List[CategoryPoint]


def line_series(
    rows: Sequence[Any],
    x_key: str,
    series_keys: Mapping[str, str],
) -> LineChart:
    """
    One x value per row, one series per {field: label} entry.

    Rows may be pydantic models or plain dicts; row order is kept.
    """
    def get(row: Any, key: str) -> Any:
        return row[key] if isinstance(row, Mapping) else getattr(row, key)

    return LineChart(
        categories=[get(row, x_key) for row in rows],
        series=[
            Series(key=key, label=label, data=[get(row, key) for row in rows])
            for key, label in series_keys.items()
        ],
    )


def category_series(pairs: Sequence[Tuple[str, float]]) -> CategoryChart:
    return CategoryChart(points=[CategoryPoint(category=name, value=value) for name, value in pairs])
