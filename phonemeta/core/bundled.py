# file: phonemeta/core/bundled.py
"""
Metadata source backed by the data shipped inside the `phonenumbers` package.

Useful for regenerating artifacts from a known-good dataset and for checking the
pipeline against real calling-code layouts (e.g. the NANPA regions sharing +1).
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import phonenumbers
from phonenumbers import PhoneMetadata

from phonemeta.core.model import MetadataRecord, NumberFormat, PhoneNumberDesc

logger = logging.getLogger(__name__)

# Attribute name on phonenumbers.PhoneMetadata -> XML element name.
_DESC_FIELDS: dict[str, str] = {
    "general_desc": "generalDesc",
    "fixed_line": "fixedLine",
    "mobile": "mobile",
    "toll_free": "tollFree",
    "premium_rate": "premiumRate",
    "shared_cost": "sharedCost",
    "personal_number": "personalNumber",
    "voip": "voip",
    "pager": "pager",
    "uan": "uan",
    "voicemail": "voicemail",
    "no_international_dialling": "noInternationalDialling",
}

# Attribute name on phonenumbers.PhoneMetadata -> XML attribute name.
_STRING_FIELDS: dict[str, str] = {
    "international_prefix": "internationalPrefix",
    "preferred_international_prefix": "preferredInternationalPrefix",
    "national_prefix": "nationalPrefix",
    "preferred_extn_prefix": "preferredExtnPrefix",
    "national_prefix_for_parsing": "nationalPrefixForParsing",
    "national_prefix_transform_rule": "nationalPrefixTransformRule",
    "leading_digits": "leadingDigits",
}


def _convert_desc(desc: Any, *, lite_build: bool) -> PhoneNumberDesc:
    return PhoneNumberDesc(
        national_number_pattern=desc.national_number_pattern,
        example_number=None if lite_build else desc.example_number,
        possible_lengths=tuple(desc.possible_length or ()),
        possible_lengths_local_only=tuple(desc.possible_length_local_only or ()),
    )


def _convert_format(nf: Any, intl_formats: dict[str, str] | None) -> NumberFormat:
    # phonenumbers keeps international formats in a parallel list; an empty list
    # means they match the national ones, otherwise a missing pattern means "NA".
    intl_format = None if intl_formats is None else intl_formats.get(nf.pattern, "NA")
    return NumberFormat(
        pattern=nf.pattern,
        format=nf.format,
        leading_digits=tuple(nf.leading_digits_pattern or ()),
        intl_format=intl_format,
        national_prefix_formatting_rule=nf.national_prefix_formatting_rule,
        national_prefix_optional_when_formatting=bool(
            nf.national_prefix_optional_when_formatting
        ),
        carrier_code_formatting_rule=nf.domestic_carrier_code_formatting_rule,
    )


def record_from_phonenumbers(
    metadata: PhoneMetadata, *, lite_build: bool = False
) -> MetadataRecord:
    """Convert a `phonenumbers.PhoneMetadata` object into a `MetadataRecord`."""

    attributes: list[tuple[str, str]] = []
    for attr, xml_name in _STRING_FIELDS.items():
        value = getattr(metadata, attr, None)
        if value is not None:
            attributes.append((xml_name, str(value)))
    if getattr(metadata, "mobile_number_portable_region", False):
        attributes.append(("mobileNumberPortableRegion", "true"))

    descriptions: list[tuple[str, PhoneNumberDesc]] = []
    for attr, xml_name in _DESC_FIELDS.items():
        desc = getattr(metadata, attr, None)
        if desc is not None:
            descriptions.append((xml_name, _convert_desc(desc, lite_build=lite_build)))

    intl_list = getattr(metadata, "intl_number_format", None) or ()
    intl_formats = {f.pattern: f.format for f in intl_list} if intl_list else None

    return MetadataRecord(
        id=metadata.id,
        country_code=int(metadata.country_code or 0),
        main_country_for_code=bool(metadata.main_country_for_code),
        attributes=tuple(attributes),
        descriptions=tuple(descriptions),
        number_formats=tuple(
            _convert_format(nf, intl_formats) for nf in metadata.number_format or ()
        ),
    )


def load_bundled_metadata(
    regions: Iterable[str] | None = None,
    non_geo_codes: Iterable[int] | None = None,
    *,
    lite_build: bool = False,
) -> list[MetadataRecord]:
    """
    Load records from the `phonenumbers` dataset.

    Args:
        regions: Region codes to load, in the order given (default: all
            supported regions, sorted).
        non_geo_codes: Non-geographical calling codes to load after the regions
            (default: all of them when `regions` is also None, otherwise none).
        lite_build: Omit example numbers from the records.

    Raises:
        KeyError: if a requested region or calling code has no bundled metadata.
    """

    if regions is None:
        region_list = sorted(phonenumbers.SUPPORTED_REGIONS)
        code_list = sorted(
            phonenumbers.COUNTRY_CODES_FOR_NON_GEO_REGIONS if non_geo_codes is None else non_geo_codes
        )
    else:
        region_list = [r.upper() for r in regions]
        code_list = list(non_geo_codes or ())

    records: list[MetadataRecord] = []
    for region in region_list:
        metadata = PhoneMetadata.metadata_for_region(region, None)
        if metadata is None:
            raise KeyError(f"No bundled metadata for region {region!r}")
        records.append(record_from_phonenumbers(metadata, lite_build=lite_build))
    for code in code_list:
        metadata = PhoneMetadata.metadata_for_nongeo_region(code, None)
        if metadata is None:
            raise KeyError(f"No bundled metadata for calling code {code}")
        records.append(record_from_phonenumbers(metadata, lite_build=lite_build))
    logger.info("Loaded %d records from bundled phonenumbers metadata", len(records))
    return records
