import pytest

from numlab.insurance import (
    Interest,
    compounding_factor,
    discount_factor,
    end_value,
    end_value_of_annuity_in_advance,
    end_value_of_annuity_in_arrear,
    fundamental_value,
    fundamental_value_of_annuity_in_advance,
    fundamental_value_of_annuity_in_arrear,
    term_in_periods,
)


@pytest.mark.parametrize("rate", [0.01, 0.05, 0.2])
def test_compounding_and_discount_are_inverse(rate):
    assert compounding_factor(rate) * discount_factor(rate) == pytest.approx(1.0)


def test_zero_rate_factors():
    assert compounding_factor(0.0) == 1.0
    assert discount_factor(0.0) == 1.0


def test_end_value_and_fundamental_value_round_trip():
    start = Interest(i=0.04, n=7, b_0=1500.0)
    grown = end_value(start)
    back = fundamental_value(Interest(i=0.04, n=7, b_n=grown))
    assert back == pytest.approx(1500.0)


def test_term_in_periods_recovers_n():
    start = Interest(i=0.03, n=12, b_0=200.0)
    target = end_value(start)
    assert term_in_periods(Interest(i=0.03, b_0=200.0, b_n=target)) == pytest.approx(12.0)


def test_annuity_in_arrear_is_sum_of_discounts():
    interest = Interest(i=0.05, n=6)
    v = discount_factor(0.05)
    expected = sum(v**k for k in range(1, 7))
    assert fundamental_value_of_annuity_in_arrear(interest) == pytest.approx(expected)


def test_annuity_in_advance_is_sum_of_discounts():
    interest = Interest(i=0.05, n=6)
    v = discount_factor(0.05)
    expected = sum(v**k for k in range(0, 6))
    assert fundamental_value_of_annuity_in_advance(interest) == pytest.approx(expected)


def test_end_values_are_compounded_fundamental_values():
    interest = Interest(i=0.07, n=9)
    q = compounding_factor(0.07)
    assert end_value_of_annuity_in_advance(interest) == pytest.approx(
        fundamental_value_of_annuity_in_advance(interest) * q**9
    )
    assert end_value_of_annuity_in_arrear(interest) == pytest.approx(
        fundamental_value_of_annuity_in_arrear(interest) * q**9
    )


def test_advance_exceeds_arrear():
    interest = Interest(i=0.1, n=4)
    assert fundamental_value_of_annuity_in_advance(interest) == pytest.approx(
        fundamental_value_of_annuity_in_arrear(interest) * compounding_factor(0.1)
    )


def test_arrear_with_zero_rate_raises():
    with pytest.raises(ZeroDivisionError):
        fundamental_value_of_annuity_in_arrear(Interest(i=0.0, n=3))