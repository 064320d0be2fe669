"""Tests for the birth date decoder — century table, D-numbers, month bands."""

from __future__ import annotations

from datetime import date

import pytest

from norwegian_tin.decoders.dates import (
    CENTURY_TABLE,
    decode_date,
    month_band,
    person_kind,
    resolve_century,
)
from norwegian_tin.decoders.fields import parse_fields
from norwegian_tin.errors import InvalidDateError, UnknownIndividualRangeError
from norwegian_tin.schemas.tin import ErrorKind, PersonKind


def _decode(tin: str):
    return decode_date(parse_fields(tin))


class TestCentury:
    @pytest.mark.parametrize(
        ("year2", "individual", "century"),
        [
            (0, 0, 1900),
            (99, 499, 1900),
            (54, 500, 1800),
            (99, 749, 1800),
            (0, 500, 2000),
            (39, 999, 2000),
            (40, 900, 1900),
            (99, 999, 1900),
        ],
    )
    def test_known_ranges(self, year2: int, individual: int, century: int) -> None:
        assert resolve_century(year2, individual) == century

    @pytest.mark.parametrize(("year2", "individual"), [(45, 600), (53, 500), (40, 750), (99, 899)])
    def test_unknown_range(self, year2: int, individual: int) -> None:
        with pytest.raises(UnknownIndividualRangeError) as exc_info:
            resolve_century(year2, individual)
        assert exc_info.value.kind == ErrorKind.UNKNOWN_INDIVIDUAL_RANGE

    def test_unknown_range_is_an_invalid_date(self) -> None:
        with pytest.raises(InvalidDateError):
            resolve_century(45, 600)

    def test_table_covers_all_individual_numbers(self) -> None:
        covered = {
            n for rng in CENTURY_TABLE for n in range(rng.individual_low, rng.individual_high + 1)
        }
        assert covered == set(range(1000))


class TestDecodeDate:
    def test_standard_date(self) -> None:
        decoded = _decode("01010112377")
        assert decoded.as_date() == date(1901, 1, 1)
        assert decoded.is_d_number is False

    def test_d_number_offset_removed(self) -> None:
        decoded = _decode("41010112360")
        assert decoded.day == 1
        assert decoded.is_d_number is True

    def test_d_number_last_day(self) -> None:
        decoded = _decode("71057107345")
        assert decoded.as_date() == date(1971, 5, 31)
        assert decoded.is_d_number is True

    def test_eighteen_hundreds(self) -> None:
        assert _decode("01016060085").year == 1860

    def test_two_thousands(self) -> None:
        assert _decode("01011095000").year == 2010

    def test_nineteen_forties_from_high_individual(self) -> None:
        assert _decode("01014595000").year == 1945

    def test_leap_day_2000(self) -> None:
        assert _decode("29020050088").as_date() == date(2000, 2, 29)

    def test_no_leap_day_1900(self) -> None:
        """1900 is not a Gregorian leap year even though 00 % 4 == 0."""
        with pytest.raises(InvalidDateError):
            _decode("29020012300")

    @pytest.mark.parametrize(
        "tin",
        [
            "00000000000",  # day 00, month 00
            "01130112345",  # month 13
            "11001000073",  # month 00
            "32010112345",  # day 32
            "40010112345",  # day 40: neither birth day nor D-number
            "72010112345",  # D-number day 32
            "71020112345",  # D-number 31 February
            "31040112345",  # 31 April
            "01210112345",  # month tens digit 2 is unassigned
            "01330112345",  # month tens digit 3 is unassigned
        ],
    )
    def test_invalid_dates(self, tin: str) -> None:
        with pytest.raises(InvalidDateError):
            _decode(tin)

    def test_unknown_individual_range(self) -> None:
        with pytest.raises(UnknownIndividualRangeError):
            _decode("01014560000")


class TestMonthBands:
    @pytest.mark.parametrize(
        ("tin", "kind", "month"),
        [
            ("16057902284", PersonKind.NORMAL, 5),
            ("22517149261", PersonKind.H_NUMBER, 11),
            ("08639815316", PersonKind.ANONYMOUS, 3),
            ("70887100797", PersonKind.SYNTHETIC, 8),
        ],
    )
    def test_band_offset_removed(self, tin: str, kind: PersonKind, month: int) -> None:
        fields = parse_fields(tin)
        assert person_kind(fields) == kind
        assert decode_date(fields).month == month

    def test_month_band_table(self) -> None:
        assert month_band(12) == (PersonKind.NORMAL, 0)
        assert month_band(52) == (PersonKind.H_NUMBER, 40)
        assert month_band(61) == (PersonKind.ANONYMOUS, 60)
        assert month_band(92) == (PersonKind.SYNTHETIC, 80)

    def test_unassigned_band(self) -> None:
        with pytest.raises(InvalidDateError):
            month_band(25)

    def test_synthetic_month_out_of_range(self) -> None:
        """Month field 93 is synthetic band month 13."""
        with pytest.raises(InvalidDateError):
            _decode("01930112345")
