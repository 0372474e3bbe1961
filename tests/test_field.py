import pytest

from gfshare.errors import NotInvertibleError
from gfshare.field import (
    add,
    evaluate_polynomial,
    is_probable_prime,
    modular_inverse,
    multiply,
    negate,
    reduce,
    subtract,
)
from gfshare.policy import DEFAULT_PRIME

P = 97


def test_results_are_canonical():
    assert add(96, 5, P) == 4
    assert subtract(3, 10, P) == 90
    assert multiply(50, 50, P) == 2500 % P
    assert negate(5, P) == 92
    assert negate(0, P) == 0
    assert reduce(-1, P) == 96
    for value in (add(-200, 3, P), subtract(-5, 400, P), multiply(-7, 11, P)):
        assert 0 <= value < P


def test_modular_inverse():
    for a in range(1, P):
        assert multiply(a, modular_inverse(a, P), P) == 1
    assert modular_inverse(-1, P) == 96


def test_modular_inverse_rejects_zero():
    with pytest.raises(NotInvertibleError):
        modular_inverse(0, P)
    with pytest.raises(NotInvertibleError):
        modular_inverse(2 * P, P)


def test_modular_inverse_composite_modulus():
    with pytest.raises(NotInvertibleError) as exc:
        modular_inverse(6, 15)
    assert exc.value.value == 6
    assert exc.value.prime == 15
    assert modular_inverse(2, 15) == 8


def test_evaluate_polynomial():
    # 3 + 2x + x^2 at x = 4
    assert evaluate_polynomial([3, 2, 1], 4, P) == 27
    assert evaluate_polynomial([3, 2, 1], 10, P) == 123 % P
    assert evaluate_polynomial([42], 7, P) == 42
    assert evaluate_polynomial([], 7, P) == 0


@pytest.mark.parametrize(
    "n",
    [2, 3, 97, 8191, 2**31 - 1, 2**127 - 1, DEFAULT_PRIME],
)
def test_is_probable_prime_accepts_primes(n):
    assert is_probable_prime(n)


@pytest.mark.parametrize(
    "n",
    [-7, 0, 1, 4, 15, 16, 561, 3215031751, (2**31 - 1) * 1000000007, DEFAULT_PRIME * 3],
)
def test_is_probable_prime_rejects_composites(n):
    assert not is_probable_prime(n)
