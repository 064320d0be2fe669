"""Pydantic schemas and enums for the Norwegian TIN decoders.

Pure data classes — no I/O. Every model is frozen: a result is produced fresh
per call and never mutated afterwards.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Variant(str, Enum):
    """Classification of an accepted 11-digit TIN. Exactly one holds."""

    FNUMBER = "f_number"
    DNUMBER = "d_number"
    SYNTHETIC_TEST = "synthetic_test"
    NEW_FORMAT_2032 = "new_format_2032"


class PersonKind(str, Enum):
    """Month-field band of a person number."""

    NORMAL = "normal"            # month 01–12
    H_NUMBER = "h_number"        # month + 40
    ANONYMOUS = "anonymous"      # month + 60
    SYNTHETIC = "synthetic"      # month + 80 (Skatteetaten / Tenor)

    @property
    def is_test_id(self) -> bool:
        """Every non-normal band is an auxiliary or test number."""
        return self is not PersonKind.NORMAL

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS: dict[PersonKind, str] = {
    PersonKind.NORMAL: "",
    PersonKind.H_NUMBER: "H-Number",
    PersonKind.ANONYMOUS: "Anonymous",
    PersonKind.SYNTHETIC: "Synthetic",
}


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"


class ChecksumScheme(str, Enum):
    """Which control-digit rule the first control digit satisfied."""

    LEGACY = "legacy"            # weighted sum ≡ 0 (mod 11)
    FORMAT_2032 = "format_2032"  # weighted sum ≡ 1, 2 or 3 (mod 11)


class ErrorKind(str, Enum):
    """Reason a candidate was rejected."""

    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTER = "invalid_character"
    INVALID_DATE = "invalid_date"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    UNKNOWN_INDIVIDUAL_RANGE = "unknown_individual_range"


# ---------------------------------------------------------------------------
# Pipeline intermediates
# ---------------------------------------------------------------------------


class DigitFields(BaseModel):
    """Fixed-width fields sliced out of an 11-digit candidate.

    Values are the literal digits: the D-number day offset and the month-band
    offset are still applied here.
    """

    model_config = ConfigDict(frozen=True)

    digits: str
    day: int                   # 01–31, or 41–71 for D-numbers
    month: int                 # 01–12, or shifted by 40 / 60 / 80
    year2: int
    individual_number: int     # 000–999
    check1: int
    check2: int


class DecodedDate(BaseModel):
    """Calendar birth date recovered from the date field."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int
    is_d_number: bool = False

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)


# ---------------------------------------------------------------------------
# Public results
# ---------------------------------------------------------------------------


def mask_digits(digits: str, kind: PersonKind | None = None) -> str:
    """First six digits followed by ``*****``, prefixed with the band label.

    Only the birth date part stays visible; this is the form used in logs.
    """
    prefix = ""
    if kind is not None and kind.is_test_id:
        prefix = f" ({kind.label}) "
    return f"{prefix}{digits[:6]}*****"


class TinResult(BaseModel):
    """Result of validating a Norwegian 11-digit TIN.

    Either ``valid`` with a ``variant`` (``decoded_date`` is ``None`` only for
    reserved test IDs with no calendar date), or invalid with an ``error``.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    tin: str
    variant: Variant | None = None
    kind: PersonKind | None = None
    decoded_date: DecodedDate | None = None
    gender: Gender | None = None
    scheme: ChecksumScheme | None = None
    error: ErrorKind | None = None
    message: str | None = None

    @property
    def birthdate(self) -> date | None:
        if self.decoded_date is None:
            return None
        return self.decoded_date.as_date()

    @property
    def masked(self) -> str:
        return mask_digits(self.tin, self.kind)


class NorwegianTin(BaseModel):
    """A parsed, valid Norwegian TIN.

    ``str()`` gives the masked form so the value can be logged safely.
    """

    model_config = ConfigDict(frozen=True)

    digits: str
    variant: Variant
    kind: PersonKind
    decoded_date: DecodedDate | None = None
    gender: Gender | None = None
    scheme: ChecksumScheme | None = None

    @property
    def is_test_id(self) -> bool:
        return self.variant is Variant.SYNTHETIC_TEST or self.kind.is_test_id

    @property
    def birthdate(self) -> date | None:
        if self.decoded_date is None:
            return None
        return self.decoded_date.as_date()

    def __str__(self) -> str:
        return mask_digits(self.digits, self.kind)


class OrgNumberResult(BaseModel):
    """Result of validating a 9-digit Norwegian organisation number."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    org_number: str
    error: ErrorKind | None = None
    message: str | None = None
