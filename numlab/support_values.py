"""Polynomial interpolation through support values in monomial, Lagrange and Newton bases."""

from __future__ import annotations

import abc

import numpy as np


def _column(values) -> np.ndarray:
    return np.asarray(values, dtype=float).reshape(-1, 1)


class PolynomialBase(abc.ABC):
    """Interpolating polynomial through the support points ``(x_i, y_i)``."""

    @abc.abstractmethod
    def evaluate(self, X) -> np.ndarray:
        """Return ``p(x)`` for every value of ``X`` as a column."""

    @abc.abstractmethod
    def function(self) -> str:
        """Return a textual form of the polynomial."""

    def __str__(self) -> str:
        return self.function()


class MonomBase(PolynomialBase):
    """Polynomial ``a_0 + a_1 x + ... + a_n x^n`` found by solving the Vandermonde system."""

    def __init__(self, X, Y) -> None:
        x = _column(X)[:, 0]
        y = _column(Y)
        if y.shape[0] != x.size:
            raise ValueError(f"{x.size} support values but {y.shape[0]} evaluated values")
        vandermonde = np.vander(x, x.size, increasing=True)
        if np.linalg.det(vandermonde) == 0.0:
            raise ValueError("singular Vandermonde matrix; support values are most likely equal")
        try:
            self.coefficients = np.linalg.solve(vandermonde, y)
        except np.linalg.LinAlgError as exc:
            raise ValueError("singular Vandermonde matrix; support values are most likely equal") from exc

    def evaluate(self, X) -> np.ndarray:
        x = _column(X)
        result = np.zeros_like(x)
        for power, coefficient in enumerate(self.coefficients[:, 0]):
            result += coefficient * x**power
        return result

    def function(self) -> str:
        terms = []
        for power, coefficient in enumerate(self.coefficients[:, 0]):
            term = f"{int(coefficient)}"
            if power > 0:
                term += f"x^{power}"
            terms.append(term)
        return " + ".join(terms)


class LagrangeBase(PolynomialBase):
    """Polynomial ``sum y_i L_i(x)`` built from Lagrange coefficients."""

    def __init__(self, X, Y) -> None:
        self.x = _column(X)
        self.y = _column(Y)

    def get_coefficient(self, xk: float, i: int) -> float:
        """Return ``L_i(xk) = prod_{j != i} (xk - x_j) / (x_i - x_j)``."""
        xs = self.x[:, 0]
        result = 1.0
        for j, xj in enumerate(xs):
            if j == i:
                continue
            result *= (xk - xj) / (xs[i] - xj)
        return result

    def evaluate(self, X) -> np.ndarray:
        x = _column(X)
        ys = self.y[:, 0]
        values = [
            sum(yi * self.get_coefficient(xk, i) for i, yi in enumerate(ys)) for xk in x[:, 0]
        ]
        return np.array(values, dtype=float).reshape(-1, 1)

    def build_lx(self, i: int) -> str:
        """Return the text of ``L_i``; empty if two support values coincide."""
        xs = self.x[:, 0]
        xi = xs[i]
        parts = []
        needs_operator = False
        for j, xj in enumerate(xs):
            if j == i:
                needs_operator = False
                continue
            if xi - xj == 0:
                return ""
            if needs_operator:
                parts.append(" * ")
            if xi - xj < 0:
                parts.append("-")
            if xj != 0:
                if xj < 0:
                    parts.append(f"(x + {abs(xj):.3f})")
                else:
                    parts.append(f"(x - {xj:.3f})")
            else:
                parts.append("x")
            parts.append(f"/{abs(xi - xj):.3f}")
            needs_operator = True
        return "".join(parts)

    def function(self) -> str:
        out = []
        for i, yi in enumerate(self.y[:, 0]):
            if yi == 0:
                continue
            if i > 0:
                out.append(" + ")
            out.append(f"{int(yi)} * (")
            out.append(self.build_lx(i))
            out.append(")")
        return "".join(out)


class NewtonBase(PolynomialBase):
    """Polynomial ``sum b_i omega_i(x)`` with divided-difference coefficients ``b_i``."""

    def __init__(self, X, Y) -> None:
        self.x = _column(X)
        y = _column(Y)
        xs = self.x[:, 0]
        m = xs.size
        if y.shape[0] != m:
            raise ValueError(f"{m} support values but {y.shape[0]} evaluated values")
        table = np.zeros((m, m))
        table[:, 0] = y[:, 0]
        for j in range(1, m):
            for i in range(j, m):
                table[i, j] = (table[i, j - 1] - table[i - 1, j - 1]) / (xs[i] - xs[i - j])
        self.coefficients = np.diag(table).reshape(-1, 1)

    def function(self) -> str:
        xs = self.x[:, 0]
        out = []
        for i, coefficient in enumerate(self.coefficients[:, 0]):
            if i > 0:
                out.append(" + ")
            out.append(f"{coefficient:.3f}")
            for xj in xs[:i]:
                if xj != 0:
                    if xj > 0:
                        out.append(f"* (x - {xj:.3f})")
                    else:
                        out.append(f"* (x + {abs(xj):.3f})")
                else:
                    out.append("* x")
        return "".join(out)

    def get_coefficient(self, index: int, x: float) -> float:
        """Return ``prod_{i < index - 1} (x - x_i)``."""
        if index < 1:
            raise ValueError("coefficient index must be at least 1")
        result = 1.0
        for xi in self.x[: index - 1, 0]:
            result *= x - xi
        return result

    def evaluate(self, X) -> np.ndarray:
        x = _column(X)
        b = self.coefficients[:, 0]
        xs = self.x[:, 0]
        result = np.full_like(x, b[-1])
        for j in range(b.size - 2, -1, -1):
            result = b[j] + (x - xs[j]) * result
        return result