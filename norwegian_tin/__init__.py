"""Validation and classification of Norwegian TINs.

Usage:
    from norwegian_tin import validate

    result = validate("01010112377")
    result.valid          # True
    result.variant        # Variant.FNUMBER
    result.birthdate      # date(1901, 1, 1)
"""

from norwegian_tin.config import settings
from norwegian_tin.decoders import (
    TestRegistry,
    build_registry,
    classify,
    get_registry,
    is_valid,
    parse,
    validate,
    validate_org_number,
)
from norwegian_tin.errors import (
    ChecksumMismatchError,
    InvalidCharacterError,
    InvalidDateError,
    InvalidLengthError,
    TinValidationError,
    UnknownIndividualRangeError,
)
from norwegian_tin.log import configure_logging
from norwegian_tin.schemas.tin import (
    ChecksumScheme,
    DecodedDate,
    DigitFields,
    ErrorKind,
    Gender,
    NorwegianTin,
    OrgNumberResult,
    PersonKind,
    TinResult,
    Variant,
)

__all__ = [
    "ChecksumMismatchError",
    "ChecksumScheme",
    "DecodedDate",
    "DigitFields",
    "ErrorKind",
    "Gender",
    "InvalidCharacterError",
    "InvalidDateError",
    "InvalidLengthError",
    "NorwegianTin",
    "OrgNumberResult",
    "PersonKind",
    "TestRegistry",
    "TinResult",
    "TinValidationError",
    "UnknownIndividualRangeError",
    "Variant",
    "build_registry",
    "classify",
    "configure_logging",
    "get_registry",
    "is_valid",
    "parse",
    "settings",
    "validate",
    "validate_org_number",
]
