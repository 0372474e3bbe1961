"""Threshold secret sharing over a prime field."""

from __future__ import annotations

from .consistency import ScreeningReport, find_inconsistent_shares, screen_shares
from .errors import (
    DuplicateShareXError,
    InsufficientSharesError,
    InvalidShareError,
    InvalidThresholdError,
    NotInvertibleError,
    SecretOutOfRangeError,
    SharingError,
)
from .field import add, is_probable_prime, modular_inverse, multiply, negate, subtract
from .policy import SharingPolicy, load_policy
from .shamir import RandomSource, Share, interpolate_at, reconstruct, split, verify

__all__ = [
    "split",
    "reconstruct",
    "verify",
    "interpolate_at",
    "Share",
    "RandomSource",
    "screen_shares",
    "find_inconsistent_shares",
    "ScreeningReport",
    "add",
    "subtract",
    "multiply",
    "negate",
    "modular_inverse",
    "is_probable_prime",
    "SharingPolicy",
    "load_policy",
    "SharingError",
    "InvalidThresholdError",
    "DuplicateShareXError",
    "NotInvertibleError",
    "InsufficientSharesError",
    "SecretOutOfRangeError",
    "InvalidShareError",
]
