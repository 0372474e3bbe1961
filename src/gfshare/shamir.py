# src/gfshare/shamir.py
"""Shamir's Secret Sharing over a prime field.

This module provides the sharing primitives:

``split``
    Split an integer secret into ``n`` shares with a reconstruction threshold
    of ``k`` using a random polynomial.

``interpolate_at``
    Evaluate the polynomial fitted through a set of points at any x.

``reconstruct``
    Recover the secret (the value at ``x = 0``) from ``k`` shares produced by
    :func:`split`.

``verify``
    Check a candidate point against a reference set of ``k`` shares.

With ``k == 1`` the polynomial is constant and every share *is* the secret;
such shares provide no confidentiality.
"""

from __future__ import annotations

import secrets
from typing import Iterable, Literal, NamedTuple, Optional, Protocol, Sequence

from . import policy as _policy
from .errors import (
    DuplicateShareXError,
    InsufficientSharesError,
    InvalidShareError,
    InvalidThresholdError,
    SecretOutOfRangeError,
)
from .field import (
    add,
    evaluate_polynomial,
    is_probable_prime,
    modular_inverse,
    multiply,
    reduce,
    subtract,
)

VerifyMode = Literal["curve", "secret"]


class Share(NamedTuple):
    x: int
    y: int


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def resolve_prime(prime: Optional[int]) -> int:
    """Return ``prime`` or the configured default, rejecting non-prime moduli."""
    p = _policy.policy.prime if prime is None else prime
    if p < 2:
        raise InvalidShareError(f"Field modulus must be at least 2, got {p}")
    if not is_probable_prime(p):
        raise InvalidShareError(f"Field modulus {p} is not prime")
    return p


def _check_distinct(xs: Iterable[int], p: int) -> None:
    seen: set[int] = set()
    for x in xs:
        key = reduce(x, p)
        if key in seen:
            raise DuplicateShareXError(x)
        seen.add(key)


def _evaluation_points(n: int, xs: Optional[Sequence[int]], p: int) -> list[int]:
    if xs is None:
        return list(range(1, n + 1))
    points = list(xs)
    if len(points) != n:
        raise InvalidShareError(f"Expected {n} x-coordinates, got {len(points)}")
    for x in points:
        if reduce(x, p) == 0:
            # f(0) is the secret itself
            raise InvalidShareError(f"x-coordinate {x} is zero modulo the prime")
    _check_distinct(points, p)
    return points


def split(
    secret: int,
    n: int,
    k: int,
    prime: Optional[int] = None,
    *,
    xs: Optional[Sequence[int]] = None,
    rng: Optional[RandomSource] = None,
) -> list[Share]:
    """Split ``secret`` into ``n`` shares with threshold ``k``.

    ``xs`` replaces the default evaluation domain ``1..n``. ``rng`` must offer
    ``randrange``; it defaults to a fresh :class:`secrets.SystemRandom`, and a
    seeded :class:`random.Random` may be passed for reproducible tests only.
    """
    p = resolve_prime(prime)
    if n < 1 or k < 1 or k > n:
        raise InvalidThresholdError(k, n)
    if n >= p:
        raise InvalidShareError(f"Cannot issue {n} distinct nonzero shares in GF({p})")
    if n > _policy.policy.max_shares:
        raise InvalidShareError(f"At most {_policy.policy.max_shares} shares per split, got {n}")
    if secret < 0 or secret >= p:
        raise SecretOutOfRangeError("Secret out of range")

    points = _evaluation_points(n, xs, p)
    source = rng if rng is not None else secrets.SystemRandom()
    coeffs = [secret] + [source.randrange(p) for _ in range(k - 1)]

    return [Share(x, evaluate_polynomial(coeffs, x, p)) for x in points]


def interpolate_at(target_x: int, points: Sequence[tuple[int, int]], prime: Optional[int] = None) -> int:
    """Evaluate the Lagrange polynomial through ``points`` at ``target_x``.

    The result is the value of the unique polynomial of degree
    ``len(points) - 1`` passing through every point. There is no error
    correction: a single corrupted point yields a wrong value.
    """
    p = resolve_prime(prime)
    if not points:
        raise InsufficientSharesError(1, 0)
    _check_distinct((x for x, _ in points), p)

    total = 0
    for i, (xi, yi) in enumerate(points):
        num = 1
        den = 1
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            num = multiply(num, subtract(target_x, xj, p), p)
            den = multiply(den, subtract(xi, xj, p), p)
        basis = multiply(num, modular_inverse(den, p), p)
        total = add(total, multiply(yi, basis, p), p)
    return total


def reference_points(shares: Sequence[tuple[int, int]], k: int) -> Sequence[tuple[int, int]]:
    """Return the first ``k`` shares, the set a polynomial is fitted to."""
    if k < 1:
        raise InvalidThresholdError(k)
    if len(shares) < k:
        raise InsufficientSharesError(k, len(shares))
    return shares[:k]


def reconstruct(shares: Sequence[tuple[int, int]], k: int, prime: Optional[int] = None) -> int:
    """Recover the secret from the first ``k`` of ``shares``."""
    return interpolate_at(0, reference_points(shares, k), prime)


def verify(
    candidate_x: int,
    candidate_y: int,
    reference_shares: Sequence[tuple[int, int]],
    k: int,
    prime: Optional[int] = None,
    *,
    mode: VerifyMode = "curve",
) -> bool:
    """Check a candidate point against the polynomial fitted to ``reference_shares``.

    ``mode="curve"`` asks whether ``(candidate_x, candidate_y)`` lies on the
    polynomial. ``mode="secret"`` only compares ``candidate_y`` with the value
    at zero, ignoring ``candidate_x``.

    ``candidate_x = 0`` is accepted in curve mode: ``(0, secret)`` lies on the
    polynomial even though :func:`split` never issues a share there.
    """
    if mode == "curve":
        target = candidate_x
    elif mode == "secret":
        target = 0
    else:
        raise ValueError(f"Unknown verify mode: {mode!r}")
    p = resolve_prime(prime)
    expected = interpolate_at(target, reference_points(reference_shares, k), p)
    return expected == reduce(candidate_y, p)


__all__ = [
    "Share",
    "RandomSource",
    "VerifyMode",
    "resolve_prime",
    "reference_points",
    "split",
    "interpolate_at",
    "reconstruct",
    "verify",
]
