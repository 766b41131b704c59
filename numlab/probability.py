"""Descriptive statistics, norms and simple linear regression."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

import numpy as np


@dataclass
class LinearModel:
    """Fitted model ``y = beta_0 + beta_1 * x`` with estimates and residuals as column vectors."""

    beta_0: float
    beta_1: float
    y_estimate: np.ndarray
    residuals: np.ndarray


class PNorm(enum.Enum):
    """Vector norm selector."""

    INF = "inf"
    ONE = "one"
    EUKL = "eukl"


def _matrix(x) -> np.ndarray:
    return np.atleast_2d(np.asarray(x, dtype=float))


def _long_axis(x) -> np.ndarray:
    """Values along the longer dimension: the first column if taller than wide, else the first row."""
    m = _matrix(x)
    rows, cols = m.shape
    return m[:, 0] if rows > cols else m[0, :]


def _require_samples(values: np.ndarray) -> int:
    size = values.size
    if size < 2:
        raise ValueError("at least two samples are required")
    return size


def round_to(x: float, precision: int) -> float:
    """Round ``x`` to ``precision`` decimals, looking only at the next digit."""
    prec = int(10**precision)
    last_digit = abs(int(x * prec * 10)) % 10
    bump = (1 if last_digit >= 5 else 0) * (1 if x >= 0 else -1)
    return (int(x * prec) + bump) / prec


def get_exponent(x: float) -> float:
    """Smallest exponent ``e >= 1`` with ``|x| / 10**e <= 1``."""
    if not math.isfinite(x):
        raise ValueError("exponent of a non-finite value is undefined")
    exponent = 1
    while abs(x / 10.0**exponent) > 1:
        exponent += 1
    return float(exponent)


def norm(x, p_norm: PNorm = PNorm.EUKL) -> float:
    """Norm of a row or column vector."""
    m = _matrix(x)
    if m.shape[0] != 1 and m.shape[1] != 1:
        raise ValueError("norm requires a row or column vector")
    values = _long_axis(m)
    if p_norm is PNorm.INF:
        maximum = float(values[0])
        for value in values[1:]:
            if abs(value) > maximum:
                maximum = float(abs(value))
        return maximum
    if p_norm is PNorm.ONE:
        return float(np.sum(np.abs(values)))
    return math.sqrt(float(np.sum(values**2)))


def cov(x, y) -> float:
    """Sample covariance of two equally shaped vectors."""
    mx, my = _matrix(x), _matrix(y)
    if mx.shape != my.shape:
        raise ValueError(f"shape mismatch: {mx.shape} vs {my.shape}")
    xs, ys = _long_axis(mx), _long_axis(my)
    size = _require_samples(xs)
    total = float(np.dot(xs, ys))
    mean_val = float(np.mean(xs)) * float(np.mean(ys))
    return total / (size - 1) - size / (size - 1) * mean_val


def var(x) -> float:
    """Sample variance of a vector."""
    xs = _long_axis(x)
    size = _require_samples(xs)
    mean_val = float(np.mean(xs))
    total = float(np.sum(xs**2))
    return abs(total / (size - 1) - size / (size - 1) * mean_val**2)


def lm(x, y) -> LinearModel:
    """Least squares fit of ``y`` against ``x``."""
    mx, my = _matrix(x), _matrix(y)
    if mx.shape != my.shape:
        raise ValueError(f"shape mismatch: {mx.shape} vs {my.shape}")
    beta_1 = cov(mx, my) / var(mx)
    xs, ys = _long_axis(mx), _long_axis(my)
    beta_0 = float(np.mean(ys)) - beta_1 * float(np.mean(xs))
    estimate = (beta_0 + beta_1 * xs).reshape(-1, 1)
    residuals = ys.reshape(-1, 1) - estimate
    return LinearModel(beta_0=beta_0, beta_1=beta_1, y_estimate=estimate, residuals=residuals)


def coefficient_of_determination(y, y_hat) -> float:
    """Ratio ``var(y) / var(y_hat)``."""
    return var(y) / var(y_hat)


def regression(a) -> np.ndarray:
    """Fit a line through the points ``(i, a_i)``, ``i = 1..n``, and return its values as a column."""
    values = _long_axis(a)
    size = values.size
    u1 = np.linspace(1.0, float(size), size)
    u2 = np.ones(size)
    right = np.array([values @ u1, values @ u2])
    left = np.array([[u1 @ u1, u1 @ u2], [u1 @ u2, u2 @ u2]])
    slope, intercept = np.linalg.solve(left, right)
    return (intercept + slope * u1).reshape(-1, 1)


def sd(x, axis: int = 0) -> np.ndarray:
    """Population standard deviation per column (``axis == 0``) or per row otherwise."""
    m = _matrix(x)
    if axis == 0:
        return np.std(m, axis=0, keepdims=True)
    return np.std(m, axis=1, keepdims=True)


def corr(a, b) -> np.ndarray:
    """Product of the standard deviations of ``a`` and ``b`` divided by their covariance."""
    return (sd(a) @ sd(b)) / cov(a, b)