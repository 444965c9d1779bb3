from __future__ import annotations

from math import isclose

from projection_engine.core.growth import compound_interest


def test_monthly_compounding_matches_reference_values():
    result = compound_interest(principal=10000, rate=7, years=10, frequency=12)

    assert isclose(result.futureValue, 20096.61, abs_tol=0.01)
    assert isclose(result.totalInterest, 10096.61, abs_tol=0.01)


def test_zero_rate_keeps_principal():
    result = compound_interest(principal=2500, rate=0, years=5, frequency=4)

    assert result.futureValue == 2500.0
    assert result.totalInterest == 0.0
    for row in result.annualBreakdown:
        assert row.value == 2500.0
        assert row.interestEarned == 0.0


def test_future_value_never_below_principal_for_positive_rates():
    for rate, frequency in [(0.5, 1), (5, 2), (12, 4), (100, 12)]:
        result = compound_interest(principal=1000, rate=rate, years=3, frequency=frequency)
        assert result.futureValue >= 1000


def test_breakdown_has_one_row_per_year_and_is_monotonic():
    result = compound_interest(principal=5000, rate=6, years=25, frequency=4)

    years = [row.year for row in result.annualBreakdown]
    assert years == list(range(1, 26))

    values = [row.value for row in result.annualBreakdown]
    assert all(later >= earlier for earlier, later in zip(values, values[1:]))


def test_breakdown_final_row_matches_future_value():
    result = compound_interest(principal=12345.67, rate=8.25, years=40, frequency=12)

    assert isclose(result.annualBreakdown[-1].value, result.futureValue, abs_tol=0.01)


def test_breakdown_rows_chain_opening_to_closing():
    """Each year opens at the previous year's closing value."""
    result = compound_interest(principal=1000, rate=10, years=3, frequency=1)
    rows = result.annualBreakdown

    assert rows[0].openingValue == 1000.0
    assert rows[0].value == 1100.0
    assert rows[1].openingValue == rows[0].value
    assert rows[1].value == 1210.0
    assert rows[2].value == 1331.0
    assert isclose(rows[2].interestEarned, 121.0, abs_tol=0.01)


def test_single_year_horizon_produces_one_row():
    result = compound_interest(principal=100, rate=5, years=1, frequency=1)

    assert len(result.annualBreakdown) == 1
    assert result.annualBreakdown[0].value == result.futureValue == 105.0
