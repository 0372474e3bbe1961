"""Exceptions raised by the secret sharing primitives."""
from __future__ import annotations


class SharingError(ValueError):
    """Base class for invalid secret sharing input."""


class InvalidThresholdError(SharingError):
    """Raised when ``k`` or ``n`` do not satisfy ``1 <= k <= n``."""

    def __init__(self, k: int, n: int | None = None) -> None:
        self.k = k
        self.n = n
        if n is None:
            message = f"Threshold must be at least 1, got k={k}"
        else:
            message = f"Invalid threshold: need 1 <= k <= n, got k={k}, n={n}"
        super().__init__(message)


class DuplicateShareXError(SharingError):
    """Raised when two points share an x-coordinate modulo the prime."""

    def __init__(self, x: int) -> None:
        self.x = x
        super().__init__(f"Duplicate share x-coordinate: {x}")


class NotInvertibleError(SharingError):
    """Raised when an element has no inverse modulo the prime."""

    def __init__(self, value: int, prime: int) -> None:
        self.value = value
        self.prime = prime
        super().__init__(f"{value} is not invertible modulo {prime}")


class InsufficientSharesError(SharingError):
    """Raised when fewer shares are supplied than the threshold requires."""

    def __init__(self, required: int, supplied: int) -> None:
        self.required = required
        self.supplied = supplied
        super().__init__(f"Not enough shares. Need {required}, got {supplied}")


class SecretOutOfRangeError(SharingError):
    """Raised when the secret is not an element of the field."""


class InvalidShareError(SharingError):
    """Raised for malformed evaluation points or field parameters."""


__all__ = [
    "SharingError",
    "InvalidThresholdError",
    "DuplicateShareXError",
    "NotInvertibleError",
    "InsufficientSharesError",
    "SecretOutOfRangeError",
    "InvalidShareError",
]
