# file: phonemeta/core/model.py
"""
In-memory phone number metadata model.

Records are produced once by a metadata source (XML file or the bundled
`phonenumbers` data) and are read-only afterwards. Beyond `id` and
`country_code`, the build pipeline treats a record's payload as opaque and
only hands it to the codec.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

# Region id used for non-geographical entities such as +800.
NON_GEO_REGION_ID = "001"


@dataclass(frozen=True, slots=True)
class PhoneNumberDesc:
    """Pattern data for one number type (fixed line, mobile, ...)."""

    national_number_pattern: str | None = None
    example_number: str | None = None
    possible_lengths: tuple[int, ...] = ()
    possible_lengths_local_only: tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class NumberFormat:
    pattern: str
    format: str
    leading_digits: tuple[str, ...] = ()
    intl_format: str | None = None
    national_prefix_formatting_rule: str | None = None
    national_prefix_optional_when_formatting: bool = False
    carrier_code_formatting_rule: str | None = None


@dataclass(frozen=True, slots=True)
class MetadataRecord:
    """
    Metadata for one region or one non-geographical calling code.

    Notes:
        - `id` is empty for alternate-format data and `"001"` for
          non-geographical entities.
        - `country_code` is 0 when the source carries no calling code
          (short number data).
        - `attributes` and `descriptions` are ordered name/value pairs so the
          record stays hashable.
    """

    id: str
    country_code: int
    main_country_for_code: bool = False
    attributes: tuple[tuple[str, str], ...] = ()
    descriptions: tuple[tuple[str, PhoneNumberDesc], ...] = ()
    number_formats: tuple[NumberFormat, ...] = ()

    def attribute(self, name: str) -> str | None:
        for key, value in self.attributes:
            if key == name:
                return value
        return None

    def description(self, name: str) -> PhoneNumberDesc | None:
        for key, desc in self.descriptions:
            if key == name:
                return desc
        return None


MetadataCollection = Sequence[MetadataRecord]


def output_key(record: MetadataRecord) -> str:
    """
    Return the name suffix used for a record's output file.

    Non-geographical entities and alternate-format data have no usable region
    id, so their calling code is used instead.
    """

    if not record.id or record.id == NON_GEO_REGION_ID:
        return str(record.country_code)
    return record.id


def build_country_code_to_region_code_map(
    records: Iterable[MetadataRecord],
) -> dict[int, list[str]]:
    """
    Map each calling code to the region ids sharing it.

    Keys are returned in ascending order. Region lists keep input order, except
    that a record flagged as main country for its code is moved to the front.
    A calling code first seen on a record with an empty id (alternate formats)
    starts with an empty list.
    """

    mapping: dict[int, list[str]] = {}
    for record in records:
        regions = mapping.get(record.country_code)
        if regions is None:
            # Most calling codes map to exactly one region.
            mapping[record.country_code] = [record.id] if record.id else []
        elif record.main_country_for_code:
            regions.insert(0, record.id)
        else:
            regions.append(record.id)
    return {code: mapping[code] for code in sorted(mapping)}
