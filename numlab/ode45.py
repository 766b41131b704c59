"""Fixed-step fifth order Runge-Kutta solver with Dormand-Prince coefficients."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

_A = np.array(
    [
        [0, 0, 0, 0, 0, 0, 0],
        [1.0 / 5.0, 0, 0, 0, 0, 0, 0],
        [3.0 / 40.0, 9.0 / 40.0, 0, 0, 0, 0, 0],
        [44.0 / 45.0, -56.0 / 15.0, 32.0 / 9.0, 0, 0, 0, 0],
        [19372.0 / 6561.0, -25360.0 / 2187.0, 64448.0 / 6561.0, -212.0 / 729.0, 0, 0, 0],
        [9017.0 / 3168.0, -355.0 / 33.0, 46732.0 / 5247.0, 49.0 / 176.0, -5103.0 / 18656.0, 0, 0],
        [35.0 / 384.0, 0, 500.0 / 1113.0, 125.0 / 192.0, -2187.0 / 6784.0, 11.0 / 84.0, 0],
    ]
)
_C = np.array([0, 1.0 / 5.0, 3.0 / 10.0, 4.0 / 5.0, 8.0 / 9.0, 1.0, 1.0])
_B5 = np.array([35.0 / 384.0, 0, 500.0 / 1113.0, 125.0 / 192.0, -2187.0 / 6784.0, 11.0 / 84.0])


@dataclass
class ODEResult:
    """Solution values ``y`` (one row per time step) and the time column ``t``."""

    y: np.ndarray
    t: np.ndarray


def ode45(
    fun: Callable[[float, np.ndarray], np.ndarray],
    t_interval: Sequence[float],
    y0,
    h: float = 0.0,
) -> ODEResult:
    """Integrate ``y' = fun(t, y)`` from the first to the last time of ``t_interval``.

    ``y0`` is a row of start values; ``fun`` receives the state as a ``1 x d``
    row and returns ``d`` derivative values. A step ``h`` of 0 means a
    thousandth of the interval.
    """
    times = list(t_interval)
    if not times:
        raise ValueError("the time interval is empty")
    t_start, t_end = float(times[0]), float(times[-1])
    if h == 0:
        h = (t_end - t_start) / 1000
    if h == 0:
        raise ValueError("the time interval has zero length")
    steps = int((t_end - t_start) / h) + 1
    if steps < 1:
        raise ValueError("the step width points away from the end of the interval")

    start = np.atleast_2d(np.asarray(y0, dtype=float))[0]
    elem_size = start.size
    t = np.zeros((steps, 1))
    y = np.zeros((steps, elem_size))
    y[0] = start
    t[0, 0] = t_start

    for step in range(steps - 1):
        t[step + 1, 0] = t[step, 0] + h
        k = np.zeros((6, elem_size))
        for stage in range(6):
            y_k = y[step] + h * (_A[stage, :stage] @ k[:stage])
            derivative = fun(t[step, 0] + _C[stage] * h, y_k.reshape(1, -1))
            k[stage] = np.asarray(derivative, dtype=float).reshape(-1)
        y[step + 1] = y[step] + (_B5 @ k) * h
    return ODEResult(y=y, t=t)