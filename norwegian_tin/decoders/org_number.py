"""Norwegian organisation number (organisasjonsnummer) validator.

9 digits; the last is a modulo-11 control digit over the first eight with
weights 3 2 7 6 5 4 3 2. Leading digits for which the control digit would be
10 are never issued.
"""

from __future__ import annotations

from norwegian_tin.decoders.checksum import ORG_WEIGHTS, control_digit
from norwegian_tin.decoders.fields import clean_candidate
from norwegian_tin.errors import ChecksumMismatchError, TinValidationError
from norwegian_tin.schemas.tin import OrgNumberResult

ORG_LENGTH = 9


def validate_org_number(candidate: str | bytes) -> OrgNumberResult:
    """Validate a 9-digit Norwegian organisation number.

    Args:
        candidate: The organisation number; surrounding whitespace is ignored.

    Returns:
        OrgNumberResult with validity and, when invalid, the error kind.
    """
    raw = candidate.decode("ascii", errors="replace") if isinstance(candidate, bytes) else candidate
    try:
        digits = clean_candidate(candidate, length=ORG_LENGTH)
        if control_digit(digits[:8], ORG_WEIGHTS) != int(digits[8]):
            raise ChecksumMismatchError("Control digit does not match", candidate=digits)
    except TinValidationError as exc:
        return OrgNumberResult(
            valid=False,
            org_number=raw.strip(),
            error=exc.kind,
            message=str(exc),
        )

    return OrgNumberResult(valid=True, org_number=digits)
