# file: phonemeta/core/shape.py
"""
Shape selection for the generated calling-code lookup table.

The generated container must carry no more structure than the data needs:

- `FullMap`: several calling codes, and at least one has region ids.
- `CountryCodeSet`: several calling codes, none with region ids
  (alternate-format data).
- `RegionCodeSet`: a single calling code, typically the `0` placeholder used by
  short number data, so only the region ids matter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

logger = logging.getLogger(__name__)

LOAD_FACTOR = 0.75


def capacity_for(entry_count: int) -> int:
    """Initial hash container capacity for `entry_count` entries at `LOAD_FACTOR`."""

    return int(entry_count / LOAD_FACTOR)


@dataclass(frozen=True, slots=True)
class FullMap:
    entries: tuple[tuple[int, tuple[str, ...]], ...]

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    @property
    def capacity(self) -> int:
        return capacity_for(self.entry_count)


@dataclass(frozen=True, slots=True)
class CountryCodeSet:
    country_codes: tuple[int, ...]

    @property
    def entry_count(self) -> int:
        return len(self.country_codes)

    @property
    def capacity(self) -> int:
        return capacity_for(self.entry_count)


@dataclass(frozen=True, slots=True)
class RegionCodeSet:
    region_codes: tuple[str, ...]

    @property
    def entry_count(self) -> int:
        return len(self.region_codes)

    @property
    def capacity(self) -> int:
        return capacity_for(self.entry_count)


ShapeDecision = Union[FullMap, CountryCodeSet, RegionCodeSet]


def select_shape(country_code_to_regions: Mapping[int, Sequence[str]]) -> ShapeDecision:
    """
    Pick the minimal container shape for a calling code -> region ids mapping.

    Iteration order of the mapping (and of each region list) is preserved in
    the returned decision.
    """

    has_region_codes = any(regions for regions in country_code_to_regions.values())
    has_country_codes = len(country_code_to_regions) > 1

    shape: ShapeDecision
    if has_region_codes and has_country_codes:
        shape = FullMap(
            entries=tuple(
                (code, tuple(regions)) for code, regions in country_code_to_regions.items()
            )
        )
    elif has_country_codes:
        shape = CountryCodeSet(country_codes=tuple(country_code_to_regions))
    else:
        regions = country_code_to_regions.get(0)
        if regions is None:
            # A lone calling code other than 0 still yields its region list.
            regions = next(iter(country_code_to_regions.values()), ())
        shape = RegionCodeSet(region_codes=tuple(regions))

    logger.info(
        "Selected %s shape with %d entries (capacity %d)",
        type(shape).__name__,
        shape.entry_count,
        shape.capacity,
    )
    return shape
