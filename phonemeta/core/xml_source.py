# file: phonemeta/core/xml_source.py
"""
XML metadata source.

Reads the `PhoneNumberMetadata.xml` layout:

    <phoneNumberMetadata>
      <territories>
        <territory id="US" countryCode="1" mainCountryForCode="true" ...>
          <availableFormats>
            <numberFormat pattern="..."><leadingDigits>..</leadingDigits><format>..</format></numberFormat>
          </availableFormats>
          <generalDesc><nationalNumberPattern>..</nationalNumberPattern></generalDesc>
          <fixedLine>..</fixedLine>
        </territory>
      </territories>
    </phoneNumberMetadata>

The loader does not validate metadata; it only converts it into
`MetadataRecord` objects in document order.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from phonemeta.core.model import MetadataRecord, NumberFormat, PhoneNumberDesc

logger = logging.getLogger(__name__)


class MetadataSourceError(ValueError):
    """Raised when the metadata input cannot be turned into records."""


DESCRIPTION_ELEMENTS: tuple[str, ...] = (
    "generalDesc",
    "fixedLine",
    "mobile",
    "tollFree",
    "premiumRate",
    "sharedCost",
    "personalNumber",
    "voip",
    "pager",
    "uan",
    "emergency",
    "voicemail",
    "shortCode",
    "standardRate",
    "carrierSpecific",
    "smsServices",
    "noInternationalDialling",
)

_RECORD_ATTRIBUTES = {"id", "countryCode", "mainCountryForCode"}
_WHITESPACE = re.compile(r"\s+")
_LENGTH_RANGE = re.compile(r"^\[(\d+)-(\d+)\]$")


def _strip_whitespace(text: str | None) -> str | None:
    if text is None:
        return None
    return _WHITESPACE.sub("", text)


def parse_possible_lengths(value: str | None) -> tuple[int, ...]:
    """
    Expand a possible-lengths attribute such as ``"[4-6],9"`` into ``(4, 5, 6, 9)``.
    """

    if not value:
        return ()
    lengths: list[int] = []
    for token in value.split(","):
        token = token.strip()
        m = _LENGTH_RANGE.match(token)
        try:
            if m:
                lengths.extend(range(int(m.group(1)), int(m.group(2)) + 1))
            else:
                lengths.append(int(token))
        except ValueError as exc:
            raise MetadataSourceError(f"Bad possible length {token!r} in {value!r}") from exc
    return tuple(lengths)


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() == "true"


def _parse_desc(element: ET.Element, *, lite_build: bool) -> PhoneNumberDesc:
    lengths = element.find("possibleLengths")
    example = element.findtext("exampleNumber")
    return PhoneNumberDesc(
        national_number_pattern=_strip_whitespace(element.findtext("nationalNumberPattern")),
        example_number=None if lite_build else _strip_whitespace(example),
        possible_lengths=parse_possible_lengths(
            lengths.get("national") if lengths is not None else None
        ),
        possible_lengths_local_only=parse_possible_lengths(
            lengths.get("localOnly") if lengths is not None else None
        ),
    )


def _parse_number_format(element: ET.Element) -> NumberFormat:
    pattern = element.get("pattern")
    fmt = element.findtext("format")
    if pattern is None or fmt is None:
        raise MetadataSourceError("numberFormat requires a pattern attribute and a format element")
    leading = tuple(
        _strip_whitespace(ld.text) or "" for ld in element.findall("leadingDigits")
    )
    return NumberFormat(
        pattern=pattern,
        format=fmt,
        leading_digits=leading,
        intl_format=element.findtext("intlFormat"),
        national_prefix_formatting_rule=element.get("nationalPrefixFormattingRule"),
        national_prefix_optional_when_formatting=_parse_bool(
            element.get("nationalPrefixOptionalWhenFormatting")
        ),
        carrier_code_formatting_rule=element.get("carrierCodeFormattingRule"),
    )


def parse_territory(element: ET.Element, *, lite_build: bool = False) -> MetadataRecord:
    """Convert one `<territory>` element into a record."""

    region_id = element.get("id", "")
    raw_code = element.get("countryCode")
    try:
        country_code = int(raw_code) if raw_code else 0
    except ValueError as exc:
        raise MetadataSourceError(
            f"Territory {region_id!r} has a non-numeric countryCode {raw_code!r}"
        ) from exc

    attributes = tuple(
        (k, v) for k, v in element.attrib.items() if k not in _RECORD_ATTRIBUTES
    )

    descriptions: list[tuple[str, PhoneNumberDesc]] = []
    for name in DESCRIPTION_ELEMENTS:
        desc = element.find(name)
        if desc is not None:
            descriptions.append((name, _parse_desc(desc, lite_build=lite_build)))

    formats = tuple(
        _parse_number_format(nf) for nf in element.iterfind("availableFormats/numberFormat")
    )

    return MetadataRecord(
        id=region_id,
        country_code=country_code,
        main_country_for_code=_parse_bool(element.get("mainCountryForCode")),
        attributes=attributes,
        descriptions=tuple(descriptions),
        number_formats=formats,
    )


def load_metadata_collection(path: Path, *, lite_build: bool = False) -> list[MetadataRecord]:
    """
    Read every territory in `path`, in document order.

    Args:
        path: Metadata XML file.
        lite_build: Omit example numbers from the records.

    Raises:
        OSError: if the file cannot be read.
        MetadataSourceError: if the XML is malformed or a territory is unusable.
    """

    try:
        tree = ET.parse(path)
    except ET.ParseError as exc:
        raise MetadataSourceError(f"Failed to parse {path}: {exc}") from exc

    records = [
        parse_territory(t, lite_build=lite_build)
        for t in tree.getroot().iterfind("territories/territory")
    ]
    logger.info("Loaded %d territories from %s (lite_build=%s)", len(records), path, lite_build)
    return records
