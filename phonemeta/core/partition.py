# file: phonemeta/core/partition.py
"""
Per-region partitioning of a metadata collection.

Every record becomes its own single-record collection, stored in a file named
`<prefix>_<output key>`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator

from phonemeta.core.model import MetadataRecord, output_key
from phonemeta.io.codec import encode_collection

logger = logging.getLogger(__name__)

Encoder = Callable[[Iterable[MetadataRecord]], bytes]


@dataclass(frozen=True, slots=True)
class RegionPartition:
    key: str
    payload: bytes


def partition(
    records: Iterable[MetadataRecord], *, encoder: Encoder = encode_collection
) -> Iterator[RegionPartition]:
    """Yield one encoded single-record collection per record, in input order."""

    for record in records:
        yield RegionPartition(key=output_key(record), payload=encoder([record]))


def partition_path(file_prefix: Path, key: str) -> Path:
    return Path(f"{file_prefix}_{key}")


def write_partitions(
    records: Iterable[MetadataRecord],
    file_prefix: Path,
    *,
    encoder: Encoder = encode_collection,
) -> list[Path]:
    """
    Write every record to `<file_prefix>_<key>` and return the paths written.

    Duplicate keys overwrite the earlier file (a warning is logged). Any
    OSError aborts the remaining writes.
    """

    file_prefix.parent.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    seen: set[str] = set()
    for part in partition(records, encoder=encoder):
        path = partition_path(file_prefix, part.key)
        if part.key in seen:
            logger.warning("Output key %s appears more than once; overwriting %s", part.key, path)
        seen.add(part.key)
        with path.open("wb") as fh:
            fh.write(part.payload)
        logger.debug(
            "Wrote %d bytes to %s", len(part.payload), path, extra={"output_key": part.key}
        )
        written.append(path)
    logger.info("Wrote %d metadata files with prefix %s", len(written), file_prefix)
    return written
