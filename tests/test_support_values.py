import numpy as np
import pytest

from numlab.support_values import LagrangeBase, MonomBase, NewtonBase, PolynomialBase

X = np.array([[-1.0], [0.5], [2.0], [3.0]])
Y = np.array([[4.0], [-2.0], [1.0], [5.0]])
PROBE = np.array([[-2.0], [0.0], [1.0], [2.5], [4.0]])


@pytest.mark.parametrize("cls", [MonomBase, LagrangeBase, NewtonBase])
def test_interpolates_support_points(cls):
    base = cls(X, Y)
    np.testing.assert_allclose(base.evaluate(X), Y, atol=1e-9)


@pytest.mark.parametrize("cls", [MonomBase, LagrangeBase, NewtonBase])
def test_evaluate_returns_column(cls):
    base = cls(X, Y)
    assert base.evaluate(PROBE).shape == (5, 1)


def test_all_bases_agree_away_from_support_points():
    monom = MonomBase(X, Y).evaluate(PROBE)
    lagrange = LagrangeBase(X, Y).evaluate(PROBE)
    newton = NewtonBase(X, Y).evaluate(PROBE)
    np.testing.assert_allclose(monom, lagrange, atol=1e-9)
    np.testing.assert_allclose(lagrange, newton, atol=1e-9)


def test_reproduces_polynomial_of_matching_degree():
    xs = np.array([[0.0], [1.0], [2.0], [4.0]])
    cubic = lambda v: v**3 - 2 * v + 1  # noqa: E731
    for cls in (MonomBase, LagrangeBase, NewtonBase):
        base = cls(xs, cubic(xs))
        np.testing.assert_allclose(base.evaluate(PROBE), cubic(PROBE), atol=1e-8)


def test_monom_equal_support_values_raise():
    with pytest.raises(ValueError):
        MonomBase([[1.0], [1.0]], [[2.0], [3.0]])


def test_monom_coefficients_match_numpy_polyfit():
    base = MonomBase(X, Y)
    expected = np.polyfit(X[:, 0], Y[:, 0], 3)[::-1]
    np.testing.assert_allclose(base.coefficients[:, 0], expected, atol=1e-9)


def test_monom_function_lists_every_power():
    text = MonomBase(X, Y).function()
    assert text.count(" + ") == 3
    assert "x^1" in text and "x^2" in text and "x^3" in text
    assert str(MonomBase(X, Y)) == text


def test_lagrange_coefficients_are_kronecker_delta():
    base = LagrangeBase(X, Y)
    for i in range(4):
        for j in range(4):
            expected = 1.0 if i == j else 0.0
            assert base.get_coefficient(X[j, 0], i) == pytest.approx(expected, abs=1e-12)


def test_lagrange_coefficients_sum_to_one():
    base = LagrangeBase(X, Y)
    for xk in PROBE[:, 0]:
        assert sum(base.get_coefficient(xk, i) for i in range(4)) == pytest.approx(1.0)


def test_lagrange_build_lx_text():
    base = LagrangeBase([[0.0], [1.0]], [[1.0], [1.0]])
    assert base.build_lx(0) == "-(x - 1.000)/1.000"


def test_lagrange_build_lx_empty_for_equal_values():
    base = LagrangeBase([[1.0], [1.0]], [[1.0], [2.0]])
    assert base.build_lx(0) == ""


def test_lagrange_function_skips_zero_values():
    base = LagrangeBase([[0.0], [1.0], [2.0]], [[0.0], [3.0], [0.0]])
    text = base.function()
    assert text.startswith(" + 3 * (")
    assert text.count("* (") == 1
    assert str(base) == text


def test_newton_function_text():
    base = NewtonBase([[0.0], [1.0]], [[1.0], [3.0]])
    assert base.function() == "1.000 + 2.000* x"


def test_newton_function_negative_support_value():
    base = NewtonBase([[-1.0], [1.0]], [[0.0], [2.0]])
    assert "* (x + 1.000)" in base.function()


def test_newton_first_coefficient_is_first_value():
    base = NewtonBase(X, Y)
    assert base.coefficients[0, 0] == Y[0, 0]
    assert base.coefficients.shape == (4, 1)


def test_newton_get_coefficient_product():
    base = NewtonBase(X, Y)
    assert base.get_coefficient(1, 7.0) == 1.0
    assert base.get_coefficient(3, 2.0) == pytest.approx((2.0 - X[0, 0]) * (2.0 - X[1, 0]))


def test_newton_get_coefficient_rejects_zero_index():
    with pytest.raises(ValueError):
        NewtonBase(X, Y).get_coefficient(0, 1.0)


def test_polynomial_base_is_abstract():
    with pytest.raises(TypeError):
        PolynomialBase()


def test_row_vectors_accepted():
    column = NewtonBase(X, Y).evaluate(PROBE)
    row = NewtonBase(X.T, Y.T).evaluate(PROBE.T)
    np.testing.assert_allclose(column, row)