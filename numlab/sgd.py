"""Stochastic gradient descent for linear models with a leading bias weight."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np


def net_input(X, weights) -> np.ndarray:
    """Compute ``X @ w + b`` where ``b`` is the first row of ``weights`` and ``w`` the rest."""
    X = np.atleast_2d(np.asarray(X, dtype=float))
    weights = np.atleast_2d(np.asarray(weights, dtype=float))
    bias = weights[0, 0]
    return X @ weights[1:] + bias


class SGD:
    """Fits weight matrices sample by sample using the squared error.

    ``weight_update`` replaces the built-in update: it receives a sample and its
    target and returns the cost. ``net_input_fun`` replaces the built-in net input.
    """

    def __init__(
        self,
        eta: float = 0.01,
        n_iter: int = 10,
        shuffle: bool = False,
        weight_update: Callable[[np.ndarray, np.ndarray], float] | None = None,
        net_input_fun: Callable[[np.ndarray], np.ndarray] | None = None,
    ) -> None:
        self.eta = eta
        self.n_iter = n_iter
        self.shuffle = shuffle
        self.weight_update = weight_update
        self.net_input_fun = net_input_fun
        self.cost = np.zeros((0, 0))

    def fit(self, X, y, weights) -> np.ndarray:
        """Train ``weights`` in place over ``n_iter`` epochs; record the cost per epoch and return them."""
        X = np.atleast_2d(np.asarray(X, dtype=float))
        y = np.asarray(y, dtype=float).reshape(X.shape[0], -1)
        self.cost = np.zeros((self.n_iter, 1))
        for epoch in range(self.n_iter):
            if self.shuffle:
                X, y = self.shuffle_data(X, y)
            total = 0.0
            for xi, target in zip(X, y):
                xi = xi.reshape(1, -1)
                target = target.reshape(1, -1)
                if self.weight_update is not None:
                    total += self.weight_update(xi, target)
                else:
                    total += self.update_weights(xi, target, weights)
            self.cost[epoch, 0] = total
        return weights

    def partial_fit(self, X, y, weights) -> np.ndarray:
        """Update ``weights`` in place with one pass over the given samples and return them."""
        X = np.atleast_2d(np.asarray(X, dtype=float))
        y = np.atleast_2d(np.asarray(y, dtype=float))
        if y.shape[0] > 1:
            for xi, target in zip(X, y):
                self.update_weights(xi.reshape(1, -1), target.reshape(1, -1), weights)
        else:
            self.update_weights(X, y, weights)
        return weights

    def update_weights(self, xi, target, weights) -> float:
        """Apply one gradient step to ``weights`` in place and return the mean squared-error cost."""
        xi = np.atleast_2d(np.asarray(xi, dtype=float))
        target = np.atleast_2d(np.asarray(target, dtype=float))
        if self.net_input_fun is not None:
            output = np.atleast_2d(self.net_input_fun(xi))
        else:
            output = net_input(xi, weights)
        error = target - output
        weights[0] += self.eta * error[0, 0]
        delta = self.eta * (xi.T @ error)
        rows = weights.shape[0]
        weights[1:] += delta[: rows - 1]
        return float(np.sum(error * error * 0.5)) / target.shape[0]

    def shuffle_data(self, X, y) -> tuple[np.ndarray, np.ndarray]:
        """Return the samples in training order; the order is kept as given."""
        return X, y