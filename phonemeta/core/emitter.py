# file: phonemeta/core/emitter.py
"""
Java source emission for the calling-code lookup table.

The emitter only renders a `ShapeDecision` that was already chosen by
`phonemeta.core.shape.select_shape`; it never inspects the raw mapping.
"""

from __future__ import annotations

from functools import singledispatch

from phonemeta.core.shape import (
    LOAD_FACTOR,
    CountryCodeSet,
    FullMap,
    RegionCodeSet,
    ShapeDecision,
)
from phonemeta.io.source_writer import BodyBuilder, ImportsBuilder

MAP_COMMENT = (
    "  // A mapping from a country code to the region codes which denote the\n"
    "  // country/region represented by that country code. In the case of multiple\n"
    "  // countries sharing a calling code, such as the NANPA countries, the one\n"
    '  // indicated with "isMainCountryForCode" in the metadata should be first.\n'
)
COUNTRY_CODE_SET_COMMENT = "  // A set of all country codes for which data is available.\n"
REGION_CODE_SET_COMMENT = "  // A set of all region codes for which data is available.\n"
CAPACITY_COMMENT = (
    "    // The capacity is set to %d as there are %d different entries,\n"
    f"    // and this offers a load factor of roughly {LOAD_FACTOR}.\n"
)

ACCESSOR_NAMES: dict[type, str] = {
    FullMap: "getCountryCodeToRegionCodeMap",
    CountryCodeSet: "getCountryCodeSet",
    RegionCodeSet: "getRegionCodeSet",
}


def _java_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


@singledispatch
def emit(shape: ShapeDecision, imports: ImportsBuilder, body: BodyBuilder) -> None:
    """Render `shape` as a static accessor into `body`, registering its imports."""

    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


@emit.register
def _emit_map(shape: FullMap, imports: ImportsBuilder, body: BodyBuilder) -> None:
    body.add(MAP_COMMENT)

    imports.add("java.util.ArrayList")
    imports.add("java.util.HashMap")
    imports.add("java.util.List")
    imports.add("java.util.Map")

    body.add("  static Map<Integer, List<String>> getCountryCodeToRegionCodeMap() {\n")
    body.add_format(CAPACITY_COMMENT, shape.capacity, shape.entry_count)
    body.add("    Map<Integer, List<String>> countryCodeToRegionCodeMap =\n")
    body.add(f"        new HashMap<Integer, List<String>>({shape.capacity});\n")
    body.add("\n")
    body.add("    ArrayList<String> listWithRegionCode;\n")
    body.add("\n")

    for country_code, region_codes in shape.entries:
        body.add(f"    listWithRegionCode = new ArrayList<String>({len(region_codes)});\n")
        for region_code in region_codes:
            body.add(f"    listWithRegionCode.add({_java_string(region_code)});\n")
        body.add(f"    countryCodeToRegionCodeMap.put({country_code}, listWithRegionCode);\n")
        body.add("\n")

    body.add("    return countryCodeToRegionCodeMap;\n")
    body.add("  }\n")


@emit.register
def _emit_country_code_set(
    shape: CountryCodeSet, imports: ImportsBuilder, body: BodyBuilder
) -> None:
    body.add(COUNTRY_CODE_SET_COMMENT)

    imports.add("java.util.HashSet")
    imports.add("java.util.Set")

    body.add("  static Set<Integer> getCountryCodeSet() {\n")
    body.add_format(CAPACITY_COMMENT, shape.capacity, shape.entry_count)
    body.add(f"    Set<Integer> countryCodeSet = new HashSet<Integer>({shape.capacity});\n")
    body.add("\n")

    for country_code in shape.country_codes:
        body.add(f"    countryCodeSet.add({country_code});\n")

    body.add("\n")
    body.add("    return countryCodeSet;\n")
    body.add("  }\n")


@emit.register
def _emit_region_code_set(
    shape: RegionCodeSet, imports: ImportsBuilder, body: BodyBuilder
) -> None:
    body.add(REGION_CODE_SET_COMMENT)

    imports.add("java.util.HashSet")
    imports.add("java.util.Set")

    body.add("  static Set<String> getRegionCodeSet() {\n")
    body.add_format(CAPACITY_COMMENT, shape.capacity, shape.entry_count)
    body.add(f"    Set<String> regionCodeSet = new HashSet<String>({shape.capacity});\n")
    body.add("\n")

    for region_code in shape.region_codes:
        body.add(f"    regionCodeSet.add({_java_string(region_code)});\n")

    body.add("\n")
    body.add("    return regionCodeSet;\n")
    body.add("  }\n")
