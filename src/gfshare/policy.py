"""Centralised configuration for the sharing primitives.

The policy holds the field parameters used when a caller does not pass an
explicit prime, and the upper bound on the number of shares per split. Values
can be overridden with environment variables so deployments can pin a
different field without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .field import is_probable_prime

DEFAULT_PRIME = 208351617316091241234326746312124448251235562226470491514186331217050270460481
DEFAULT_MAX_SHARES = 1024


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        # base 0 accepts both decimal and 0x-prefixed hex
        return int(value.strip(), 0)
    except ValueError:
        return default


@dataclass(frozen=True)
class SharingPolicy:
    """Holds the runtime field parameters."""

    prime: int = DEFAULT_PRIME
    max_shares: int = DEFAULT_MAX_SHARES


def load_policy() -> SharingPolicy:
    """Load the sharing policy considering environment overrides.

    A composite ``GFSHARE_PRIME`` or a ``GFSHARE_MAX_SHARES`` below one is
    treated like an unparseable value and replaced by the default.
    """

    prime = _load_int("GFSHARE_PRIME", DEFAULT_PRIME)
    if not is_probable_prime(prime):
        prime = DEFAULT_PRIME
    max_shares = _load_int("GFSHARE_MAX_SHARES", DEFAULT_MAX_SHARES)
    if max_shares < 1:
        max_shares = DEFAULT_MAX_SHARES
    return SharingPolicy(prime=prime, max_shares=max_shares)


policy = load_policy()


__all__ = ["DEFAULT_PRIME", "DEFAULT_MAX_SHARES", "SharingPolicy", "policy", "load_policy"]
