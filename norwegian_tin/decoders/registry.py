"""Registry of Skatteetaten synthetic test identifiers.

Synthetic identifiers from Skatteetaten's test population (Tenor) carry the
birth month + 80. They are reserved for integration testing and are accepted
whatever their control digits. The explicit ``RESERVED_TEST_IDS`` snapshot
and any IDs configured through ``TIN_EXTRA_TEST_IDS`` are matched exactly and
accepted even when they encode no calendar date.

The registry is built once per process and never mutated afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from norwegian_tin.config import TinSettings, settings
from norwegian_tin.decoders.dates import MONTH_BANDS
from norwegian_tin.schemas.tin import DigitFields, PersonKind

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Snapshot of published Tenor synthetic identifiers.
RESERVED_TEST_IDS: frozenset[str] = frozenset({
    "70848000149",
    "56865400190",
    "60889201749",
    "70887100797",
    "47914500210",
    "52910875191",
    "41901200279",
    "70924700201",
})


@dataclass(frozen=True)
class TestBand:
    """A month-field band reserved for auxiliary or test numbers."""

    __test__ = False

    name: str
    kind: PersonKind
    month_offset: int
    checksum_exempt: bool = False


TEST_BANDS: tuple[TestBand, ...] = (
    TestBand(name="H-number", kind=PersonKind.H_NUMBER, month_offset=40),
    TestBand(name="Anonymous", kind=PersonKind.ANONYMOUS, month_offset=60),
    TestBand(
        name="Skatteetaten synthetic",
        kind=PersonKind.SYNTHETIC,
        month_offset=80,
        checksum_exempt=True,
    ),
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TestRegistry:
    """Read-only lookup table of reserved test identifiers and bands."""

    __test__ = False

    reserved_ids: frozenset[str] = RESERVED_TEST_IDS
    bands: tuple[TestBand, ...] = TEST_BANDS

    def match_reserved(self, digits: str) -> bool:
        """Exact match against the explicit list of reserved IDs."""
        return digits in self.reserved_ids

    def band_for(self, fields: DigitFields) -> TestBand | None:
        """Return the band of the month field, or None for normal numbers."""
        band = MONTH_BANDS.get(fields.month // 10)
        if band is None:
            return None
        kind, _ = band
        for test_band in self.bands:
            if test_band.kind is kind:
                return test_band
        return None

    def is_checksum_exempt(self, fields: DigitFields) -> bool:
        band = self.band_for(fields)
        return band is not None and band.checksum_exempt


def build_registry(extra_test_ids: list[str] | None = None) -> TestRegistry:
    """Build a registry from the compiled snapshot plus extra reserved IDs."""
    extra = frozenset(extra_test_ids or ())
    registry = TestRegistry(reserved_ids=RESERVED_TEST_IDS | extra)
    logger.debug(
        "Test registry built: %d reserved IDs (%d configured), %d bands",
        len(registry.reserved_ids),
        len(extra - RESERVED_TEST_IDS),
        len(registry.bands),
    )
    return registry


@lru_cache(maxsize=1)
def get_registry() -> TestRegistry:
    """Process-wide registry built from the module settings."""
    return registry_from_settings(settings)


def registry_from_settings(config: TinSettings) -> TestRegistry:
    return build_registry(config.extra_test_ids)
