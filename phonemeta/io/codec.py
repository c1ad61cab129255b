# file: phonemeta/io/codec.py
"""
Binary encoding for metadata collections.

Layout (all integers big-endian):

    magic   4 bytes  b"PNMD"
    version u16
    count   u32      number of records
    record* see `_write_record`

Strings are written as a u32 byte length followed by UTF-8 bytes; optional
strings are prefixed with a one-byte presence flag.
"""

from __future__ import annotations

import struct
from typing import Iterable

from phonemeta.core.model import MetadataRecord, NumberFormat, PhoneNumberDesc

MAGIC = b"PNMD"
FORMAT_VERSION = 1


class CodecError(ValueError):
    """Raised when a payload cannot be encoded or decoded."""


class _Writer:
    def __init__(self) -> None:
        self._buf = bytearray()

    def raw(self, data: bytes) -> None:
        self._buf += data

    def u8(self, value: int) -> None:
        self._buf += struct.pack(">B", value)

    def u16(self, value: int) -> None:
        if not 0 <= value <= 0xFFFF:
            raise CodecError(f"Value {value} does not fit in u16")
        self._buf += struct.pack(">H", value)

    def u32(self, value: int) -> None:
        if not 0 <= value <= 0xFFFFFFFF:
            raise CodecError(f"Value {value} does not fit in u32")
        self._buf += struct.pack(">I", value)

    def boolean(self, value: bool) -> None:
        self.u8(1 if value else 0)

    def string(self, value: str) -> None:
        data = value.encode("utf-8")
        self.u32(len(data))
        self._buf += data

    def optional_string(self, value: str | None) -> None:
        self.boolean(value is not None)
        if value is not None:
            self.string(value)

    def lengths(self, values: tuple[int, ...]) -> None:
        self.u16(len(values))
        for v in values:
            self.u16(v)

    def getvalue(self) -> bytes:
        return bytes(self._buf)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def _take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise CodecError(f"Truncated payload at offset {self._pos} (wanted {size} bytes)")
        chunk = self._data[self._pos : end]
        self._pos = end
        return chunk

    def raw(self, size: int) -> bytes:
        return self._take(size)

    def u8(self) -> int:
        return int(struct.unpack(">B", self._take(1))[0])

    def u16(self) -> int:
        return int(struct.unpack(">H", self._take(2))[0])

    def u32(self) -> int:
        return int(struct.unpack(">I", self._take(4))[0])

    def boolean(self) -> bool:
        return self.u8() != 0

    def string(self) -> str:
        raw = self._take(self.u32())
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CodecError(f"Invalid UTF-8 string: {exc}") from exc

    def optional_string(self) -> str | None:
        return self.string() if self.boolean() else None

    def lengths(self) -> tuple[int, ...]:
        return tuple(self.u16() for _ in range(self.u16()))

    def at_end(self) -> bool:
        return self._pos == len(self._data)


def _write_desc(w: _Writer, desc: PhoneNumberDesc) -> None:
    w.optional_string(desc.national_number_pattern)
    w.optional_string(desc.example_number)
    w.lengths(desc.possible_lengths)
    w.lengths(desc.possible_lengths_local_only)


def _read_desc(r: _Reader) -> PhoneNumberDesc:
    return PhoneNumberDesc(
        national_number_pattern=r.optional_string(),
        example_number=r.optional_string(),
        possible_lengths=r.lengths(),
        possible_lengths_local_only=r.lengths(),
    )


def _write_format(w: _Writer, nf: NumberFormat) -> None:
    w.string(nf.pattern)
    w.string(nf.format)
    w.u16(len(nf.leading_digits))
    for ld in nf.leading_digits:
        w.string(ld)
    w.optional_string(nf.intl_format)
    w.optional_string(nf.national_prefix_formatting_rule)
    w.boolean(nf.national_prefix_optional_when_formatting)
    w.optional_string(nf.carrier_code_formatting_rule)


def _read_format(r: _Reader) -> NumberFormat:
    pattern = r.string()
    fmt = r.string()
    leading = tuple(r.string() for _ in range(r.u16()))
    return NumberFormat(
        pattern=pattern,
        format=fmt,
        leading_digits=leading,
        intl_format=r.optional_string(),
        national_prefix_formatting_rule=r.optional_string(),
        national_prefix_optional_when_formatting=r.boolean(),
        carrier_code_formatting_rule=r.optional_string(),
    )


def _write_record(w: _Writer, record: MetadataRecord) -> None:
    w.string(record.id)
    w.u32(record.country_code)
    w.boolean(record.main_country_for_code)

    w.u16(len(record.attributes))
    for key, value in record.attributes:
        w.string(key)
        w.string(value)

    w.u16(len(record.descriptions))
    for name, desc in record.descriptions:
        w.string(name)
        _write_desc(w, desc)

    w.u16(len(record.number_formats))
    for nf in record.number_formats:
        _write_format(w, nf)


def _read_record(r: _Reader) -> MetadataRecord:
    region_id = r.string()
    country_code = r.u32()
    main = r.boolean()
    attributes = tuple((r.string(), r.string()) for _ in range(r.u16()))
    descriptions = tuple((r.string(), _read_desc(r)) for _ in range(r.u16()))
    formats = tuple(_read_format(r) for _ in range(r.u16()))
    return MetadataRecord(
        id=region_id,
        country_code=country_code,
        main_country_for_code=main,
        attributes=attributes,
        descriptions=descriptions,
        number_formats=formats,
    )


def encode_collection(records: Iterable[MetadataRecord]) -> bytes:
    """Encode records, in order, into one binary collection."""

    items = list(records)
    w = _Writer()
    w.raw(MAGIC)
    w.u16(FORMAT_VERSION)
    w.u32(len(items))
    for record in items:
        _write_record(w, record)
    return w.getvalue()


def decode_collection(payload: bytes) -> list[MetadataRecord]:
    """
    Decode a payload produced by `encode_collection`.

    Raises:
        CodecError: on a bad header, unsupported version, truncation or
            trailing bytes.
    """

    r = _Reader(payload)
    if r.raw(len(MAGIC)) != MAGIC:
        raise CodecError("Not a metadata collection (bad magic)")
    version = r.u16()
    if version != FORMAT_VERSION:
        raise CodecError(f"Unsupported format version {version}")
    records = [_read_record(r) for _ in range(r.u32())]
    if not r.at_end():
        raise CodecError("Trailing bytes after metadata collection")
    return records
