"""Norwegian TIN (fødselsnummer / D-nummer) validator and classifier.

Pure Python — no I/O, no shared mutable state. Pipeline:

  1. structural parse (length, charset, field slicing)
  2. exact match against reserved synthetic test IDs (short-circuit)
  3. birth date decoding (D-number day offset, month bands, century)
  4. Skatteetaten synthetic band (short-circuit, control digits not required)
  5. control digits (legacy or 2032 rule)
  6. classification into exactly one Variant
"""

from __future__ import annotations

import logging

from norwegian_tin.config import settings
from norwegian_tin.decoders.checksum import verify_control_digits
from norwegian_tin.decoders.dates import decode_date, person_kind
from norwegian_tin.decoders.fields import parse_fields
from norwegian_tin.decoders.registry import TestRegistry, get_registry
from norwegian_tin.errors import ChecksumMismatchError, InvalidDateError, TinValidationError
from norwegian_tin.schemas.tin import (
    ChecksumScheme,
    DecodedDate,
    DigitFields,
    Gender,
    NorwegianTin,
    PersonKind,
    TinResult,
    Variant,
    mask_digits,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _gender(fields: DigitFields, scheme: ChecksumScheme | None) -> Gender | None:
    """Ninth digit parity: odd is male. Not encoded from 2032 on."""
    if scheme is not ChecksumScheme.LEGACY:
        return None
    return Gender.MALE if fields.individual_number % 2 else Gender.FEMALE


def _scheme_or_none(fields: DigitFields, accept_2032: bool) -> ChecksumScheme | None:
    try:
        return verify_control_digits(fields, accept_2032)
    except ChecksumMismatchError:
        return None


def _reserved_tin(fields: DigitFields, accept_2032: bool) -> NorwegianTin:
    """Build the result for an explicitly reserved test ID.

    Reserved IDs need not encode a calendar date; ``decoded_date`` is then None.
    """
    decoded: DecodedDate | None
    try:
        decoded = decode_date(fields)
    except InvalidDateError:
        decoded = None
    try:
        kind = person_kind(fields)
    except InvalidDateError:
        kind = PersonKind.SYNTHETIC
    scheme = _scheme_or_none(fields, accept_2032)
    return NorwegianTin(
        digits=fields.digits,
        variant=Variant.SYNTHETIC_TEST,
        kind=kind,
        decoded_date=decoded,
        gender=_gender(fields, scheme),
        scheme=scheme,
    )


def _decode(candidate: str | bytes, registry: TestRegistry, accept_2032: bool) -> NorwegianTin:
    fields = parse_fields(candidate)

    if registry.match_reserved(fields.digits):
        logger.debug("Reserved test ID matched: %s", mask_digits(fields.digits))
        return _reserved_tin(fields, accept_2032)

    decoded = decode_date(fields)
    kind = person_kind(fields)

    if registry.is_checksum_exempt(fields):
        logger.debug("Synthetic test band matched: %s", mask_digits(fields.digits, kind))
        scheme = _scheme_or_none(fields, accept_2032)
        return NorwegianTin(
            digits=fields.digits,
            variant=Variant.SYNTHETIC_TEST,
            kind=kind,
            decoded_date=decoded,
            gender=_gender(fields, scheme),
            scheme=scheme,
        )

    scheme = verify_control_digits(fields, accept_2032)
    return NorwegianTin(
        digits=fields.digits,
        variant=classify(decoded, scheme),
        kind=kind,
        decoded_date=decoded,
        gender=_gender(fields, scheme),
        scheme=scheme,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def classify(decoded: DecodedDate, scheme: ChecksumScheme) -> Variant:
    """Assign exactly one Variant to a number whose date and checksum passed.

    Test-registry matches never reach this point; they are SYNTHETIC_TEST.
    """
    if scheme is ChecksumScheme.FORMAT_2032:
        return Variant.NEW_FORMAT_2032
    if decoded.is_d_number:
        return Variant.DNUMBER
    return Variant.FNUMBER


def parse(
    candidate: str | bytes,
    *,
    registry: TestRegistry | None = None,
    accept_2032: bool | None = None,
) -> NorwegianTin:
    """Parse and classify a Norwegian TIN.

    Args:
        candidate: The 11-digit TIN; surrounding whitespace is ignored.
        registry: Test registry to use. Defaults to the process-wide one.
        accept_2032: Accept 2032-format control digits. Defaults to
            ``settings.accept_2032_format``.

    Returns:
        NorwegianTin with variant, kind, decoded date, gender and scheme.

    Raises:
        TinValidationError: A subclass naming why the candidate was rejected.
    """
    if registry is None:
        registry = get_registry()
    if accept_2032 is None:
        accept_2032 = settings.accept_2032_format
    return _decode(candidate, registry, accept_2032)


def validate(
    candidate: str | bytes,
    *,
    registry: TestRegistry | None = None,
    accept_2032: bool | None = None,
) -> TinResult:
    """Validate a Norwegian TIN without raising.

    Returns:
        TinResult that is either valid with a variant, or invalid with an error.
    """
    raw = candidate.decode("ascii", errors="replace") if isinstance(candidate, bytes) else candidate
    try:
        tin = parse(candidate, registry=registry, accept_2032=accept_2032)
    except TinValidationError as exc:
        return TinResult(
            valid=False,
            tin=raw.strip(),
            error=exc.kind,
            message=str(exc),
        )

    return TinResult(
        valid=True,
        tin=tin.digits,
        variant=tin.variant,
        kind=tin.kind,
        decoded_date=tin.decoded_date,
        gender=tin.gender,
        scheme=tin.scheme,
    )


def is_valid(candidate: str | bytes) -> bool:
    """True if ``candidate`` is an accepted Norwegian TIN of any variant."""
    return validate(candidate).valid
