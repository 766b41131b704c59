"""Interest and annuity calculations from insurance mathematics."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Interest:
    """Parameters of an interest computation.

    ``i`` is the interest rate, ``n`` the number of periods, ``b_0`` the
    starting balance, ``b_n`` the end balance and ``r`` the annual pension.
    """

    i: float = 0.0
    n: float = 0.0
    b_0: float = 0.0
    b_n: float = 0.0
    r: float = 0.0


def compounding_factor(i: float) -> float:
    """Return ``1 + i``."""
    return 1.0 + i


def discount_factor(i: float) -> float:
    """Return ``1 / (1 + i)``."""
    return 1.0 / (1.0 + i)


def fundamental_value(interest: Interest) -> float:
    """Starting balance needed to reach ``b_n`` after ``n`` periods."""
    return interest.b_n * (1.0 + interest.i) ** (-interest.n)


def end_value(interest: Interest) -> float:
    """Balance after ``n`` periods starting from ``b_0``."""
    return interest.b_0 * (1.0 + interest.i) ** interest.n


def term_in_periods(interest: Interest) -> float:
    """Number of periods needed to grow ``b_0`` into ``b_n``."""
    return (math.log(interest.b_n) - math.log(interest.b_0)) / math.log(compounding_factor(interest.i))


def fundamental_value_of_annuity_in_advance(interest: Interest) -> float:
    """Present value of an annuity paid at the start of each period."""
    discount = discount_factor(interest.i)
    return (1.0 - discount**interest.n) / (1.0 - discount)


def end_value_of_annuity_in_advance(interest: Interest) -> float:
    """Final value of an annuity paid at the start of each period."""
    factor = compounding_factor(interest.i)
    discount = discount_factor(interest.i)
    return (factor**interest.n - 1.0) / (1.0 - discount)


def fundamental_value_of_annuity_in_arrear(interest: Interest) -> float:
    """Present value of an annuity paid at the end of each period."""
    discount = discount_factor(interest.i)
    return (1.0 - discount**interest.n) / interest.i


def end_value_of_annuity_in_arrear(interest: Interest) -> float:
    """Final value of an annuity paid at the end of each period."""
    factor = compounding_factor(interest.i)
    return fundamental_value_of_annuity_in_arrear(interest) * factor**interest.n