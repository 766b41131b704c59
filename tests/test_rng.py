import pytest

from numlab import rng


def test_values_within_default_interval():
    rng.set_seed(3)
    values = [rng.get() for _ in range(200)]
    assert all(0.0 <= v <= 1.0 for v in values)


def test_values_within_custom_interval():
    rng.set_seed(11)
    values = [rng.get(-4.0, 9.0) for _ in range(200)]
    assert all(-4.0 <= v <= 9.0 for v in values)


def test_same_seed_reproduces_sequence():
    rng.set_seed(7)
    first = [rng.get(0.0, 10.0) for _ in range(20)]
    rng.set_seed(7)
    second = [rng.get(0.0, 10.0) for _ in range(20)]
    assert first == second


def test_different_seeds_give_different_sequences():
    rng.set_seed(1)
    first = [rng.get() for _ in range(10)]
    rng.set_seed(2)
    second = [rng.get() for _ in range(10)]
    assert first != second
    assert len(set(first)) == 10


def test_degenerate_interval_returns_border():
    rng.set_seed(5)
    assert rng.get(2.5, 2.5) == pytest.approx(2.5)