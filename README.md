# numlab

A small library of numerical and statistical tools built on NumPy arrays.
It is a library only; it has no command-line program.

## Installation

```
pip install .
```

To run the test suite, install with the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Contents

- `numlab.rng`: a shared, seedable uniform random number source.
  `set_seed(seed)` reseeds it and `get(low=0.0, high=1.0)` draws a number
  between the two borders.
- `numlab.insurance`: interest and annuity formulas over the frozen
  `Interest` record (fields `i`, `n`, `b_0`, `b_n`, `r`):
  `compounding_factor`, `discount_factor`, `fundamental_value`, `end_value`,
  `term_in_periods`, and the present and final values of annuities in advance
  and in arrear.
- `numlab.probability`: `norm` of a row or column vector with `PNorm.INF`,
  `PNorm.ONE` or `PNorm.EUKL`; sample `cov` and `var`; population `sd` per
  column or per row; `corr`; `lm`, a least-squares line fit returning a
  `LinearModel` with `beta_0`, `beta_1`, `y_estimate` and `residuals`;
  `coefficient_of_determination`; `regression`, which fits a line through the
  points `(i, a_i)`; and the helpers `round_to` and `get_exponent`. Functions
  that need a sample variance raise `ValueError` for fewer than two samples,
  and `norm` raises `ValueError` for anything but a vector.
- `numlab.sgd`: `net_input(X, weights)`, which treats the first row of
  `weights` as the bias, and `SGD`, which trains a weight matrix in place
  sample by sample with the squared error (`fit`, `partial_fit`,
  `update_weights`). A custom weight update or net-input function can be
  passed to the constructor; `fit` records the cost of every epoch in `cost`.
- `numlab.nodes`: nodes for expression trees: the abstract `MathNode`,
  `Operand`, `Symbolic` (a variable whose `evaluation_value` is used by
  `evaluate`) and `Number` (a constant keeping its sign in `is_negative`), the
  enums `MathNodeType` and `NodeConnectionType`, and `DEFAULT_SYMBOLS` holding
  `pi` and `e`.
- `numlab.fractals`: `NewtonFractal`, which classifies a grid of start points
  by the root of `z**3 = 1` that Newton's method reaches (0 where it does not
  converge), and `Mandelbrot`, which returns escape-time counts (0 inside the
  set).
- `numlab.ode45`: `ode45(fun, t_interval, y0, h=0.0)`, a fixed-step fifth
  order Runge-Kutta solver with Dormand-Prince coefficients, returning an
  `ODEResult` with the solution rows `y` and the time column `t`. A step of 0
  means a thousandth of the interval.
- `numlab.support_values`: interpolating polynomials through support points
  in the monomial (`MonomBase`), Lagrange (`LagrangeBase`) and Newton
  (`NewtonBase`) bases. Each has `evaluate(X)` and a textual `function()`;
  `MonomBase` raises `ValueError` when the support values make the
  Vandermonde matrix singular.

## Examples

```python
from numlab.fractals import Mandelbrot

fractal = Mandelbrot()
fractal.detail = 10
grid = fractal()          # 10 x 10 array of iteration counts
```

```python
import numpy as np
from numlab.ode45 import ode45

result = ode45(lambda t, y: -y, [0.0, 1.0], np.array([[1.0]]), h=0.01)
print(result.y[-1, 0], result.t[-1, 0])
```

```python
from numlab.insurance import Interest, end_value

print(end_value(Interest(i=0.05, n=10, b_0=1000.0)))
```

```python
import numpy as np
from numlab.support_values import NewtonBase

poly = NewtonBase([0.0, 1.0, 2.0], [1.0, 3.0, 7.0])
print(poly.evaluate(np.array([0.5, 1.5])))
print(poly)
```

## What it does not do

- There is no expression parser or equation evaluator: `numlab.nodes` offers
  the node types only, and trees have to be assembled by hand.
- Apart from the gradient-descent trainer in `numlab.sgd`, no classifiers or
  predictors are included.
- Nothing is plotted or drawn; results are returned as NumPy arrays.