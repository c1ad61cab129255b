# file: tests/test_model.py
from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from phonemeta.core.model import (
    MetadataRecord,
    PhoneNumberDesc,
    build_country_code_to_region_code_map,
    output_key,
)


def test_output_key_uses_region_id() -> None:
    assert output_key(MetadataRecord(id="US", country_code=1)) == "US"


def test_output_key_falls_back_to_calling_code() -> None:
    assert output_key(MetadataRecord(id="", country_code=800)) == "800"
    assert output_key(MetadataRecord(id="001", country_code=979)) == "979"


def test_country_code_map_puts_main_country_first() -> None:
    records = [
        MetadataRecord(id="BS", country_code=1),
        MetadataRecord(id="CA", country_code=1),
        MetadataRecord(id="US", country_code=1, main_country_for_code=True),
        MetadataRecord(id="JM", country_code=1),
    ]
    assert build_country_code_to_region_code_map(records) == {1: ["US", "BS", "CA", "JM"]}


def test_country_code_map_keys_sorted_and_alternate_formats_empty() -> None:
    records = [
        MetadataRecord(id="", country_code=49),
        MetadataRecord(id="", country_code=7),
        MetadataRecord(id="", country_code=44),
    ]
    mapping = build_country_code_to_region_code_map(records)
    assert list(mapping) == [7, 44, 49]
    assert all(regions == [] for regions in mapping.values())


def test_country_code_map_short_number_data_collects_under_zero() -> None:
    records = [MetadataRecord(id=r, country_code=0) for r in ("US", "CA", "GB")]
    assert build_country_code_to_region_code_map(records) == {0: ["US", "CA", "GB"]}


def test_record_is_immutable_and_hashable() -> None:
    record = MetadataRecord(
        id="GB",
        country_code=44,
        attributes=(("nationalPrefix", "0"),),
        descriptions=(("generalDesc", PhoneNumberDesc(national_number_pattern=r"\d{10}")),),
    )
    assert record.attribute("nationalPrefix") == "0"
    assert record.description("generalDesc").national_number_pattern == r"\d{10}"
    assert record.description("mobile") is None
    assert {record: "GB"}[record] == "GB"
    with pytest.raises(FrozenInstanceError):
        record.attributes = ()  # type: ignore[misc]
