"""Arithmetic in the prime field GF(p).

Every helper takes the modulus explicitly and returns the canonical
representative in ``[0, p)``. Python integers are unbounded, so reduction is
about keeping values canonical rather than avoiding overflow.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Sequence

from .errors import NotInvertibleError


def reduce(a: int, p: int) -> int:
    return a % p


def add(a: int, b: int, p: int) -> int:
    return (a + b) % p


def subtract(a: int, b: int, p: int) -> int:
    # % on a negative int already lands in [0, p) for p > 0
    return (a - b) % p


def multiply(a: int, b: int, p: int) -> int:
    return (a * b) % p


def negate(a: int, p: int) -> int:
    return (-a) % p


def modular_inverse(a: int, p: int) -> int:
    """Return ``a**-1 mod p`` or raise :class:`NotInvertibleError`."""

    try:
        return pow(a % p, -1, p)
    except ValueError:
        raise NotInvertibleError(a, p) from None


def evaluate_polynomial(coefficients: Sequence[int], x: int, p: int) -> int:
    """Evaluate ``sum(c_j * x**j)`` modulo ``p``, constant term first."""

    y = 0
    power = 1
    for c in coefficients:
        y = (y + c * power) % p
        power = (power * x) % p
    return y


# deterministic below 3.3e24; a strong probable-prime test above that
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


@lru_cache(maxsize=32)
def is_probable_prime(n: int) -> bool:
    """Miller-Rabin over a fixed set of witnesses."""

    if n < 2:
        return False
    for w in _WITNESSES:
        if n % w == 0:
            return n == w
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


__all__ = [
    "reduce",
    "add",
    "subtract",
    "multiply",
    "negate",
    "modular_inverse",
    "evaluate_polynomial",
    "is_probable_prime",
]
