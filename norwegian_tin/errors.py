"""Exceptions raised by the TIN decoding stages.

Each stage raises a subclass of ``TinValidationError``; ``validate()`` turns
them into an invalid ``TinResult`` and ``parse()`` lets them propagate.
"""

from __future__ import annotations

from norwegian_tin.schemas.tin import ErrorKind


class TinValidationError(ValueError):
    """Raised when a candidate is not a valid Norwegian TIN."""

    kind: ErrorKind

    def __init__(self, message: str, candidate: str = "") -> None:
        super().__init__(message)
        self.candidate = candidate


class InvalidLengthError(TinValidationError):
    kind = ErrorKind.INVALID_LENGTH


class InvalidCharacterError(TinValidationError):
    kind = ErrorKind.INVALID_CHARACTER


class InvalidDateError(TinValidationError):
    kind = ErrorKind.INVALID_DATE


class UnknownIndividualRangeError(InvalidDateError):
    """The individual number selects no century for the two-digit year."""

    kind = ErrorKind.UNKNOWN_INDIVIDUAL_RANGE


class ChecksumMismatchError(TinValidationError):
    kind = ErrorKind.CHECKSUM_MISMATCH
