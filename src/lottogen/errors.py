"""Exception hierarchy for lottogen."""

from __future__ import annotations


class LottoGenError(Exception):
    """Base class for all lottogen errors."""


class DataUnavailableError(LottoGenError):
    """Raised when draw history cannot be read or parsed."""


class DataValidationError(DataUnavailableError, ValueError):
    """Raised when draw history was read but fails validation."""
