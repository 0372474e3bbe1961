"""Screening of a share set against a trusted reference subset."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .shamir import Share, interpolate_at, reference_points, resolve_prime, verify

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScreeningReport:
    secret: int
    reference: list[Share]
    consistent: list[Share]
    inconsistent: list[Share]


def screen_shares(shares: Sequence[tuple[int, int]], k: int, prime: Optional[int] = None) -> ScreeningReport:
    """Fit the polynomial from the first ``k`` shares and check the rest.

    The reference shares are trusted as given; if one of them is corrupted the
    whole classification is meaningless.
    """

    p = resolve_prime(prime)
    reference = [Share(x, y) for x, y in reference_points(shares, k)]
    _logger.debug("Screening %d shares against reference x=%s", len(shares), [s.x for s in reference])

    consistent: list[Share] = []
    inconsistent: list[Share] = []
    for x, y in shares[k:]:
        share = Share(x, y)
        if verify(x, y, reference, k, p):
            consistent.append(share)
        else:
            _logger.warning("Share at x=%s is not on the reference polynomial", x)
            inconsistent.append(share)
    return ScreeningReport(
        secret=interpolate_at(0, reference, p),
        reference=reference,
        consistent=consistent,
        inconsistent=inconsistent,
    )


def find_inconsistent_shares(
    shares: Sequence[tuple[int, int]], k: int, prime: Optional[int] = None
) -> list[Share]:
    """Return the shares after the first ``k`` that do not fit the reference set."""

    return screen_shares(shares, k, prime).inconsistent


__all__ = ["ScreeningReport", "screen_shares", "find_inconsistent_shares"]
