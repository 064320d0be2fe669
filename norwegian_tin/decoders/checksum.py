"""Modulo-11 control digits for Norwegian TINs and organisation numbers.

Two weighted passes over the literal digits (D-number and month offsets are
not removed):

  - first control digit:  weights 3 7 6 1 8 9 4 5 2 over digits 1–9
  - second control digit: weights 5 4 3 2 7 6 5 4 3 2 over digits 1–10

Legacy numbers leave remainder 0 for the first pass. Numbers issued from 2032
may leave remainder 0, 1, 2 or 3, which gives every birth date up to four
times as many usable individual numbers. The second pass must leave
remainder 0 under both rules.
"""

from __future__ import annotations

from collections.abc import Sequence

from norwegian_tin.errors import ChecksumMismatchError
from norwegian_tin.schemas.tin import ChecksumScheme, DigitFields

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FIRST_WEIGHTS: tuple[int, ...] = (3, 7, 6, 1, 8, 9, 4, 5, 2)
SECOND_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)
ORG_WEIGHTS: tuple[int, ...] = (3, 2, 7, 6, 5, 4, 3, 2)

# Remainders of (weighted sum + first control digit) accepted from 2032.
REMAINDERS_2032: frozenset[int] = frozenset({1, 2, 3})


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _digits(value: str | Sequence[int]) -> list[int]:
    if isinstance(value, str):
        return [int(c) for c in value]
    return list(value)


def weighted_remainder(digits: str | Sequence[int], weights: Sequence[int]) -> int:
    """Weighted digit sum modulo 11."""
    values = _digits(digits)
    if len(values) != len(weights):
        msg = f"Expected {len(weights)} digits, got {len(values)}"
        raise ValueError(msg)
    return sum(d * w for d, w in zip(values, weights, strict=True)) % 11


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def control_digit(digits: str | Sequence[int], weights: Sequence[int]) -> int:
    """Compute the control digit that brings the weighted sum to 0 (mod 11).

    Raises:
        ChecksumMismatchError: The required digit would be 10, so no valid
            control digit exists for these leading digits.
    """
    check = (11 - weighted_remainder(digits, weights)) % 11
    if check == 10:
        raise ChecksumMismatchError("No valid control digit exists (remainder 10)")
    return check


def compute_control_digits(first_nine: str) -> tuple[int, int]:
    """Legacy control digits for the first nine digits of a TIN."""
    k1 = control_digit(first_nine, FIRST_WEIGHTS)
    k2 = control_digit(first_nine + str(k1), SECOND_WEIGHTS)
    return k1, k2


def allowed_first_control_digits(first_nine: str) -> tuple[int, ...]:
    """Every first control digit accepted by the 2032 rule, in ascending order.

    Includes the legacy digit when one exists.
    """
    base = weighted_remainder(first_nine, FIRST_WEIGHTS)
    return tuple(k for k in range(10) if (base + k) % 11 in REMAINDERS_2032 | {0})


def verify_control_digits(fields: DigitFields, accept_2032: bool = True) -> ChecksumScheme:
    """Check both control digits of a TIN and report the rule they satisfy.

    The first control digit is verified before the second, whose weights
    include the first control digit's position.

    Args:
        fields: Literal digit fields from ``parse_fields``.
        accept_2032: Accept first control digits leaving remainder 1–3.

    Returns:
        ChecksumScheme.LEGACY or ChecksumScheme.FORMAT_2032.

    Raises:
        ChecksumMismatchError: Either control digit is wrong.
    """
    first_nine = fields.digits[:9]
    first_remainder = (weighted_remainder(first_nine, FIRST_WEIGHTS) + fields.check1) % 11

    if first_remainder == 0:
        scheme = ChecksumScheme.LEGACY
    elif accept_2032 and first_remainder in REMAINDERS_2032:
        scheme = ChecksumScheme.FORMAT_2032
    else:
        raise ChecksumMismatchError("First control digit does not match", candidate=fields.digits)

    if control_digit(fields.digits[:10], SECOND_WEIGHTS) != fields.check2:
        raise ChecksumMismatchError("Second control digit does not match", candidate=fields.digits)

    return scheme
