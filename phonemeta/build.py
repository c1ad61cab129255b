# file: phonemeta/build.py
"""
End-to-end build: metadata XML -> per-region binary files + lookup source.

Stages run in order and each file is closed before the next one is opened.
Nothing is rolled back if a later stage fails: region files already written
stay on disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Sequence

from phonemeta.config import BuildSettings
from phonemeta.core.bundled import load_bundled_metadata
from phonemeta.core.emitter import ACCESSOR_NAMES, emit
from phonemeta.core.model import MetadataRecord, build_country_code_to_region_code_map
from phonemeta.core.partition import write_partitions
from phonemeta.core.shape import select_shape
from phonemeta.core.xml_source import load_metadata_collection
from phonemeta.io.source_writer import (
    BodyBuilder,
    ImportsBuilder,
    SourceHeader,
    compose_source,
    write_source_file,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Per-run inputs, as given on the command line."""

    input_file: Path | None
    output_dir: Path
    data_prefix: str
    mapping_class: str
    copyright_year: int
    lite_build: bool = False
    bundled: bool = False


@dataclass(frozen=True, slots=True)
class BuildResult:
    metadata_files: list[Path] = field(default_factory=list)
    mapping_file: Path | None = None
    shape: str = ""


def write_mapping_source(
    country_code_to_regions: Mapping[int, Sequence[str]],
    *,
    output_dir: Path,
    mapping_class: str,
    copyright_year: int,
    settings: BuildSettings,
) -> tuple[Path, str]:
    """Select the lookup shape, render it and write `<mapping_class>.<ext>`."""

    shape = select_shape(country_code_to_regions)

    imports = ImportsBuilder()
    body = BodyBuilder()
    emit(shape, imports, body)

    header = SourceHeader(
        class_name=mapping_class,
        package=settings.java_package,
        generator_name=settings.generator_name,
        copyright_year=copyright_year,
    )
    text = compose_source(imports, body, header)
    path = output_dir / f"{mapping_class}.{settings.source_extension}"
    write_source_file(path, text)
    logger.info("Generated %s.%s()", mapping_class, ACCESSOR_NAMES[type(shape)])
    return path, type(shape).__name__


def build_from_records(
    records: Sequence[MetadataRecord], options: BuildOptions, settings: BuildSettings
) -> BuildResult:
    """Run every output stage for an already-loaded metadata collection."""

    options.output_dir.mkdir(parents=True, exist_ok=True)
    metadata_files = write_partitions(records, options.output_dir / options.data_prefix)

    mapping = build_country_code_to_region_code_map(records)
    mapping_file, shape = write_mapping_source(
        mapping,
        output_dir=options.output_dir,
        mapping_class=options.mapping_class,
        copyright_year=options.copyright_year,
        settings=settings,
    )
    return BuildResult(metadata_files=metadata_files, mapping_file=mapping_file, shape=shape)


def run_build(options: BuildOptions, settings: BuildSettings) -> BuildResult:
    """
    Load the metadata (XML file, or the `phonenumbers` dataset when
    `options.bundled` is set) and generate all artifacts.

    Raises:
        OSError: on any file failure.
        MetadataSourceError: if the input cannot be read as metadata.
    """

    if options.bundled:
        records = load_bundled_metadata(lite_build=options.lite_build)
    elif options.input_file is None:
        raise ValueError("An input file is required unless the bundled source is used")
    else:
        records = load_metadata_collection(options.input_file, lite_build=options.lite_build)
    return build_from_records(records, options, settings)
