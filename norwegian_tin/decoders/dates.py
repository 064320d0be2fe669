"""Birth date decoder for Norwegian TINs.

Recovers the calendar date from the DDMMYY field:
  - day 41–71 marks a D-number (day + 40)
  - the month's tens digit selects a band: 0–1 normal, 4–5 H-number (+40),
    6–7 anonymous (+60), 8–9 Skatteetaten synthetic (+80)
  - the century comes from the individual number (see CENTURY_TABLE)
"""

from __future__ import annotations

import calendar
from typing import NamedTuple

from norwegian_tin.errors import InvalidDateError, UnknownIndividualRangeError
from norwegian_tin.schemas.tin import DecodedDate, DigitFields, PersonKind

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

D_NUMBER_OFFSET = 40


class CenturyRange(NamedTuple):
    individual_low: int
    individual_high: int
    year_low: int
    year_high: int
    century: int


# First match wins.
CENTURY_TABLE: tuple[CenturyRange, ...] = (
    CenturyRange(0, 499, 0, 99, 1900),
    CenturyRange(500, 749, 54, 99, 1800),
    CenturyRange(500, 999, 0, 39, 2000),
    CenturyRange(900, 999, 40, 99, 1900),
)

# Tens digit of the month field → (kind, offset). 2 and 3 are unassigned.
MONTH_BANDS: dict[int, tuple[PersonKind, int]] = {
    0: (PersonKind.NORMAL, 0),
    1: (PersonKind.NORMAL, 0),
    4: (PersonKind.H_NUMBER, 40),
    5: (PersonKind.H_NUMBER, 40),
    6: (PersonKind.ANONYMOUS, 60),
    7: (PersonKind.ANONYMOUS, 60),
    8: (PersonKind.SYNTHETIC, 80),
    9: (PersonKind.SYNTHETIC, 80),
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve_century(year2: int, individual_number: int) -> int:
    """Return the century (1800, 1900 or 2000) for a two-digit year.

    Raises:
        UnknownIndividualRangeError: No range covers the combination.
    """
    for rng in CENTURY_TABLE:
        if (
            rng.individual_low <= individual_number <= rng.individual_high
            and rng.year_low <= year2 <= rng.year_high
        ):
            return rng.century
    raise UnknownIndividualRangeError(
        f"Individual number {individual_number:03d} has no century for year {year2:02d}"
    )


def month_band(month_field: int) -> tuple[PersonKind, int]:
    """Return the (kind, offset) band of a literal month field."""
    band = MONTH_BANDS.get(month_field // 10)
    if band is None:
        raise InvalidDateError(f"Month field out of range: {month_field:02d}")
    return band


def person_kind(fields: DigitFields) -> PersonKind:
    return month_band(fields.month)[0]


def decode_date(fields: DigitFields) -> DecodedDate:
    """Decode the birth date of a TIN.

    Args:
        fields: Literal digit fields from ``parse_fields``.

    Returns:
        DecodedDate with the real calendar date and the D-number flag.

    Raises:
        InvalidDateError: The fields do not describe a real calendar date.
        UnknownIndividualRangeError: The individual number selects no century.
    """
    _, offset = month_band(fields.month)
    month = fields.month - offset

    is_d_number = D_NUMBER_OFFSET + 1 <= fields.day <= D_NUMBER_OFFSET + 31
    day = fields.day - D_NUMBER_OFFSET if is_d_number else fields.day

    if not 1 <= month <= 12:
        raise InvalidDateError(f"Invalid month: {fields.month:02d}")
    if not 1 <= day <= 31:
        raise InvalidDateError(f"Invalid day: {fields.day:02d}")

    year = resolve_century(fields.year2, fields.individual_number) + fields.year2

    if day > calendar.monthrange(year, month)[1]:
        raise InvalidDateError(f"Invalid birth date: {year}-{month:02d}-{day:02d}")

    return DecodedDate(year=year, month=month, day=day, is_d_number=is_d_number)
