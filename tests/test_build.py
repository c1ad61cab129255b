# file: tests/test_build.py
from __future__ import annotations

from pathlib import Path

import pytest

from phonemeta.build import BuildOptions, build_from_records, run_build, write_mapping_source
from phonemeta.config import BuildSettings
from phonemeta.core.model import MetadataRecord
from phonemeta.io.codec import decode_collection


def _options(input_file: Path | None, output_dir: Path, **kwargs) -> BuildOptions:
    return BuildOptions(
        input_file=input_file,
        output_dir=output_dir,
        data_prefix="data/PhoneNumberMetadataProto",
        mapping_class="CountryCodeToRegionCodeMap",
        copyright_year=2010,
        **kwargs,
    )


def test_run_build_writes_region_files_and_mapping(sample_xml: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    result = run_build(_options(sample_xml, out), BuildSettings())

    assert [p.name for p in result.metadata_files] == [
        "PhoneNumberMetadataProto_CA",
        "PhoneNumberMetadataProto_US",
        "PhoneNumberMetadataProto_GB",
        "PhoneNumberMetadataProto_800",
    ]
    assert result.shape == "FullMap"
    assert result.mapping_file == out / "CountryCodeToRegionCodeMap.java"

    text = result.mapping_file.read_text(encoding="utf-8")
    assert "package com.google.i18n.phonenumbers;\n" in text
    assert "public class CountryCodeToRegionCodeMap {\n" in text
    assert "getCountryCodeToRegionCodeMap()" in text
    assert "    // The capacity is set to 4 as there are 3 different entries,\n" in text
    us_first = text.index('listWithRegionCode.add("US");')
    ca_next = text.index('listWithRegionCode.add("CA");')
    assert us_first < ca_next
    assert "countryCodeToRegionCodeMap.put(800, listWithRegionCode);" in text

    (gb,) = decode_collection((out / "data" / "PhoneNumberMetadataProto_GB").read_bytes())
    assert gb.country_code == 44


def test_run_build_lite_build_drops_examples(sample_xml: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    run_build(_options(sample_xml, out, lite_build=True), BuildSettings())
    (us,) = decode_collection((out / "data" / "PhoneNumberMetadataProto_US").read_bytes())
    assert us.description("mobile").example_number is None


def test_build_from_records_alternate_formats_emit_country_code_set(tmp_path: Path) -> None:
    records = [MetadataRecord(id="", country_code=c) for c in (7, 44, 49)]
    result = build_from_records(
        records, _options(tmp_path / "unused.xml", tmp_path), BuildSettings()
    )
    assert result.shape == "CountryCodeSet"
    assert sorted(p.name for p in result.metadata_files) == [
        "PhoneNumberMetadataProto_44",
        "PhoneNumberMetadataProto_49",
        "PhoneNumberMetadataProto_7",
    ]
    assert "static Set<Integer> getCountryCodeSet()" in result.mapping_file.read_text(
        encoding="utf-8"
    )


def test_write_mapping_source_uses_settings(tmp_path: Path) -> None:
    settings = BuildSettings(
        java_package="org.example.phone",
        generator_name="MyGenerator",
        source_extension="txt",
    )
    path, shape = write_mapping_source(
        {0: ["US", "CA", "GB"]},
        output_dir=tmp_path,
        mapping_class="ShortNumbersRegionCodeSet",
        copyright_year=2013,
        settings=settings,
    )
    assert shape == "RegionCodeSet"
    assert path == tmp_path / "ShortNumbersRegionCodeSet.txt"
    text = path.read_text(encoding="utf-8")
    assert "Copyright (C) 2013" in text
    assert "{@link MyGenerator}" in text
    assert "package org.example.phone;\n" in text
    assert "new HashSet<String>(4);" in text


def test_run_build_bundled_source(tmp_path: Path, monkeypatch) -> None:
    records = [MetadataRecord(id="US", country_code=1, main_country_for_code=True)]
    calls: list[bool] = []

    def fake_loader(*, lite_build: bool) -> list[MetadataRecord]:
        calls.append(lite_build)
        return records

    monkeypatch.setattr("phonemeta.build.load_bundled_metadata", fake_loader)
    result = run_build(_options(None, tmp_path, lite_build=True, bundled=True), BuildSettings())
    assert calls == [True]
    assert [p.name for p in result.metadata_files] == ["PhoneNumberMetadataProto_US"]
    assert result.shape == "RegionCodeSet"


def test_run_build_without_input_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        run_build(_options(None, tmp_path), BuildSettings())
