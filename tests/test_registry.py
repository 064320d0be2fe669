"""Tests for the synthetic test-ID registry."""

from __future__ import annotations

import pytest

from norwegian_tin.config import TinSettings
from norwegian_tin.decoders.fields import parse_fields
from norwegian_tin.decoders.registry import (
    RESERVED_TEST_IDS,
    TEST_BANDS,
    TestRegistry,
    build_registry,
    get_registry,
    registry_from_settings,
)
from norwegian_tin.schemas.tin import PersonKind


class TestBands:
    def test_only_synthetic_band_is_checksum_exempt(self) -> None:
        exempt = [band.kind for band in TEST_BANDS if band.checksum_exempt]
        assert exempt == [PersonKind.SYNTHETIC]

    @pytest.mark.parametrize(
        ("tin", "kind"),
        [
            ("22517149261", PersonKind.H_NUMBER),
            ("08639815316", PersonKind.ANONYMOUS),
            ("56878500771", PersonKind.SYNTHETIC),
        ],
    )
    def test_band_for(self, tin: str, kind: PersonKind) -> None:
        band = TestRegistry().band_for(parse_fields(tin))
        assert band is not None
        assert band.kind == kind

    def test_normal_number_has_no_band(self) -> None:
        assert TestRegistry().band_for(parse_fields("16057902284")) is None

    def test_checksum_exemption(self) -> None:
        registry = TestRegistry()
        assert registry.is_checksum_exempt(parse_fields("56878500772")) is True
        assert registry.is_checksum_exempt(parse_fields("22517149261")) is False
        assert registry.is_checksum_exempt(parse_fields("16057902284")) is False


class TestReservedIds:
    def test_snapshot_matched(self) -> None:
        registry = TestRegistry()
        for tin in RESERVED_TEST_IDS:
            assert registry.match_reserved(tin)

    def test_snapshot_ids_are_eleven_digits(self) -> None:
        assert all(len(tin) == 11 and tin.isascii() and tin.isdigit() for tin in RESERVED_TEST_IDS)

    def test_unlisted_id_not_matched(self) -> None:
        assert TestRegistry().match_reserved("16057902284") is False

    def test_extra_ids_merged(self) -> None:
        registry = build_registry(["00000000000"])
        assert registry.match_reserved("00000000000")
        assert RESERVED_TEST_IDS <= registry.reserved_ids

    def test_registry_from_settings(self) -> None:
        config = TinSettings(extra_test_ids=["12345678901"])
        assert registry_from_settings(config).match_reserved("12345678901")

    def test_registry_is_immutable(self) -> None:
        registry = TestRegistry()
        with pytest.raises(AttributeError):
            registry.reserved_ids = frozenset()  # type: ignore[misc]

    def test_process_registry_is_cached(self) -> None:
        assert get_registry() is get_registry()
