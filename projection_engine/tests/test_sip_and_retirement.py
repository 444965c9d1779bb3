from __future__ import annotations

from math import isclose

from projection_engine.core.growth import sip_vs_lumpsum
from projection_engine.core.retirement import real_return_rate, retirement_corpus


def test_sip_vs_lumpsum_zero_rate_returns_capital():
    """i == 0 takes the no-growth branch instead of dividing by zero."""
    result = sip_vs_lumpsum(total_investment=60000, annual_rate=0, years=5)

    assert result.sipFutureValue == 60000.0
    assert result.lumpsumFutureValue == 60000.0
    assert result.totalInvested == 60000.0
    assert result.monthlyInstallment == 1000.0
    assert result.difference == 0.0


def test_sip_vs_lumpsum_positive_rate():
    result = sip_vs_lumpsum(total_investment=120000, annual_rate=12, years=10)

    i = 0.01
    expected_sip = 1000 * (((1 + i) ** 120 - 1) / i) * (1 + i)
    expected_lump = 120000 * 1.12 ** 10

    assert result.monthlyInstallment == 1000.0
    assert isclose(result.sipFutureValue, expected_sip, abs_tol=0.01)
    assert isclose(result.lumpsumFutureValue, expected_lump, abs_tol=0.01)
    # all capital invested on day one grows for longer
    assert result.lumpsumFutureValue > result.sipFutureValue
    assert isclose(result.difference, expected_lump - expected_sip, abs_tol=0.02)


def test_real_return_rate_is_fractional():
    assert isclose(real_return_rate(7, 6), 0.01)
    assert real_return_rate(5, 5) == 0.0
    assert real_return_rate(3, 8) < 0


def test_retirement_corpus_annuity_branch():
    result = retirement_corpus(
        current_age=30,
        retirement_age=60,
        monthly_expenses=5000,
        years_in_retirement=25,
        inflation_rate=6,
        post_retirement_return=7,
    )

    real = 0.01
    expected = 60000 * (1 - (1 + real) ** -25) / real

    assert result.yearsToRetirement == 30
    assert result.annualExpenses == 60000.0
    assert result.realReturnRate == 1.0
    assert isclose(result.requiredCorpus, expected, abs_tol=0.01)
    assert result.totalNominalExpenses == 1500000.0
    # discounting makes the corpus smaller than the plain sum
    assert result.requiredCorpus < result.totalNominalExpenses


def test_retirement_corpus_zero_real_return_is_plain_sum():
    result = retirement_corpus(
        current_age=40,
        retirement_age=65,
        monthly_expenses=3000,
        years_in_retirement=20,
        inflation_rate=6,
        post_retirement_return=6,
    )

    assert result.realReturnRate == 0.0
    assert result.requiredCorpus == 36000 * 20
    assert result.requiredCorpus == result.totalNominalExpenses


def test_retirement_corpus_negative_real_return_is_plain_sum():
    result = retirement_corpus(
        current_age=40,
        retirement_age=65,
        monthly_expenses=2500,
        years_in_retirement=30,
        inflation_rate=9,
        post_retirement_return=4,
    )

    assert result.realReturnRate == -5.0
    assert result.requiredCorpus == 2500 * 12 * 30


def test_sip_vs_lumpsum_tiny_rate_keeps_capital():
    result = sip_vs_lumpsum(total_investment=60000, annual_rate=1e-15, years=5)

    assert result.sipFutureValue == 60000.0
    assert result.lumpsumFutureValue == 60000.0
    assert result.difference == 0.0


def test_retirement_corpus_tiny_real_return_matches_plain_sum():
    result = retirement_corpus(
        current_age=30,
        retirement_age=60,
        monthly_expenses=5000,
        years_in_retirement=25,
        inflation_rate=6,
        post_retirement_return=6.000000000000001,
    )

    assert result.totalNominalExpenses == 1500000.0
    assert isclose(result.requiredCorpus, 1500000.0, abs_tol=0.01)
