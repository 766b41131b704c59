"""Newton and Mandelbrot fractals rendered into matrices of classes or iteration counts."""

from __future__ import annotations

import math

import numpy as np


def _newton_function(x: np.ndarray) -> np.ndarray:
    """Real and imaginary part of ``z**3 - 1`` for ``z = x0 + i*x1``."""
    x0, x1 = x[0], x[1]
    return np.array([x0**3 - 3.0 * x0 * x1 * x1 - 1.0, -(x1**3) + 3.0 * x0 * x0 * x1])


def _newton_jacobian(x: np.ndarray) -> np.ndarray:
    """Jacobian of :func:`_newton_function`."""
    x0, x1 = x[0], x[1]
    return np.array(
        [
            [3.0 * (x0 * x0 - x1 * x1), -6.0 * x0 * x1],
            [6.0 * x0 * x1, 3.0 * x0 * x0 - 3.0 * x1 * x1],
        ]
    )


def _newton(x0: np.ndarray, tol: float, max_iter: int) -> tuple[np.ndarray, int]:
    """Run Newton's method; return the last iterate and the iterations used, ``max_iter`` if not converged."""
    x = np.asarray(x0, dtype=float)
    with np.errstate(all="ignore"):
        for iteration in range(max_iter):
            fx = _newton_function(x)
            if not np.all(np.isfinite(fx)):
                return x, max_iter
            if np.linalg.norm(fx) <= tol:
                return x, iteration
            try:
                step = np.linalg.solve(_newton_jacobian(x), fx)
            except np.linalg.LinAlgError:
                return x, max_iter
            if not np.all(np.isfinite(step)):
                return x, max_iter
            x = x - step
            if np.linalg.norm(step) <= tol:
                return x, iteration + 1
    return x, max_iter


class NewtonFractal:
    """Basins of attraction of Newton's method for ``z**3 = 1``.

    Pixels whose iteration converges to the same root receive the same class
    number; pixels that do not converge within ``max_iter`` steps receive 0.
    """

    def __init__(
        self,
        detail: float = 1.0,
        low: float = -1.0,
        high: float = 1.0,
        max_iter: int = 100,
        tol: float = 1e-5,
    ) -> None:
        self.detail = detail
        self.x_min = low
        self.x_max = high
        self.y_min = low
        self.y_max = high
        self.max_iter = max_iter
        self.tol = tol

    def __call__(self) -> np.ndarray:
        """Return the ``n x n`` matrix of root classes."""
        n = int(math.fabs(self.x_max - self.x_min) / (1.0 / max(self.detail, 10)))
        xs = np.linspace(self.x_min, self.x_max, n)
        ys = np.linspace(self.y_min, self.y_max, n)
        result = np.zeros((n, n))
        roots: list[np.ndarray] = []
        for i, x in enumerate(xs):
            for j, y in enumerate(ys):
                root, iterations = _newton(np.array([x, y]), self.tol, self.max_iter)
                if iterations == self.max_iter:
                    result[i, j] = 0.0
                    continue
                index = 0
                for k, known in enumerate(roots):
                    if np.linalg.norm(root - known) <= self.tol:
                        index = k
                if index == 0:
                    index = len(roots)
                    roots.append(root)
                result[i, j] = float(index)
        return result


class Mandelbrot:
    """Escape-time rendering of the Mandelbrot set; points inside the set get 0."""

    def __init__(self) -> None:
        self.max_iters = 125
        self.start_x = -2.5
        self.end_x = 1.0
        self.start_y = -1.0
        self.end_y = 1.0
        self.detail = 500

    def _escape_time(self, real_c: float, imag_c: float) -> int:
        iters = 0
        real = 0.0
        imag = 0.0
        while True:
            iters += 1
            if not (iters < self.max_iters and real * real + imag * imag < 4):
                break
            temp = real
            real = real * real + real_c - imag * imag
            imag = 2 * imag * temp + imag_c
        return iters

    def __call__(self) -> np.ndarray:
        """Return the ``detail x detail`` matrix of iteration counts; rows follow the real axis."""
        step_x = (self.end_x - self.start_x) / float(self.detail)
        step_y = (self.end_y - self.start_y) / float(self.detail)
        result = np.zeros((self.detail, self.detail))
        for x in range(self.detail):
            for y in range(self.detail):
                iters = self._escape_time(self.start_x + step_x * x, self.start_y + step_y * y)
                result[x, y] = 0.0 if iters == self.max_iters else float(iters)
        return result