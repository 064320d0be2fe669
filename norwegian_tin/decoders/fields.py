"""Structural parser for 11-digit Norwegian TINs.

Layout: DDMMYY III C C
  - DD:   day of birth (41–71 for D-numbers)
  - MM:   month of birth (shifted by 40 / 60 / 80 for auxiliary bands)
  - YY:   year of birth (last 2 digits)
  - III:  individual number (selects the century)
  - C C:  two modulo-11 control digits
"""

from __future__ import annotations

import re

from norwegian_tin.errors import InvalidCharacterError, InvalidLengthError
from norwegian_tin.schemas.tin import DigitFields

TIN_LENGTH = 11

# ASCII only: str.isdigit() would accept e.g. Arabic-Indic digits.
_DIGITS_PATTERN = re.compile(r"^[0-9]+$")


def clean_candidate(candidate: str | bytes, length: int = TIN_LENGTH) -> str:
    """Trim whitespace and check length and charset.

    Raises:
        InvalidLengthError: Not exactly ``length`` characters after trimming.
        InvalidCharacterError: Any character outside ASCII ``0-9``.
    """
    if isinstance(candidate, bytes):
        try:
            candidate = candidate.decode("ascii")
        except UnicodeDecodeError as exc:
            raise InvalidCharacterError("Input contains non-ASCII bytes") from exc

    cleaned = candidate.strip()
    if len(cleaned) != length:
        raise InvalidLengthError(
            f"Expected {length} characters, got {len(cleaned)}", candidate=cleaned
        )
    if not _DIGITS_PATTERN.match(cleaned):
        raise InvalidCharacterError("Input must contain only digits 0-9", candidate=cleaned)
    return cleaned


def parse_fields(candidate: str | bytes) -> DigitFields:
    """Slice a candidate TIN into its fixed-width fields."""
    digits = clean_candidate(candidate)
    return DigitFields(
        digits=digits,
        day=int(digits[0:2]),
        month=int(digits[2:4]),
        year2=int(digits[4:6]),
        individual_number=int(digits[6:9]),
        check1=int(digits[9]),
        check2=int(digits[10]),
    )
