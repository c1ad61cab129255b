# file: tests/test_codec.py
from __future__ import annotations

import pytest

from phonemeta.core.model import MetadataRecord, NumberFormat, PhoneNumberDesc
from phonemeta.io.codec import MAGIC, CodecError, decode_collection, encode_collection


def _us_record() -> MetadataRecord:
    return MetadataRecord(
        id="US",
        country_code=1,
        main_country_for_code=True,
        attributes=(("internationalPrefix", "011"), ("nationalPrefix", "1")),
        descriptions=(
            ("generalDesc", PhoneNumberDesc(national_number_pattern=r"[2-9]\d{9}")),
            (
                "mobile",
                PhoneNumberDesc(
                    national_number_pattern=r"[2-9]\d{9}",
                    example_number="2015550123",
                    possible_lengths=(10,),
                    possible_lengths_local_only=(7,),
                ),
            ),
        ),
        number_formats=(
            NumberFormat(
                pattern=r"(\d{3})(\d{3})(\d{4})",
                format="($1) $2-$3",
                leading_digits=("[2-9]",),
                intl_format="$1-$2-$3",
                national_prefix_optional_when_formatting=True,
            ),
        ),
    )


def test_encode_decode_preserves_record() -> None:
    records = [_us_record(), MetadataRecord(id="001", country_code=800)]
    payload = encode_collection(records)
    assert payload.startswith(MAGIC)
    assert decode_collection(payload) == records


def test_encode_is_deterministic() -> None:
    assert encode_collection([_us_record()]) == encode_collection([_us_record()])


def test_decode_rejects_bad_magic() -> None:
    with pytest.raises(CodecError):
        decode_collection(b"XXXX" + encode_collection([])[4:])


def test_decode_rejects_truncated_payload() -> None:
    payload = encode_collection([_us_record()])
    with pytest.raises(CodecError):
        decode_collection(payload[:-3])


def test_decode_rejects_trailing_bytes() -> None:
    with pytest.raises(CodecError):
        decode_collection(encode_collection([]) + b"\x00")


def test_encode_rejects_negative_country_code() -> None:
    with pytest.raises(CodecError):
        encode_collection([MetadataRecord(id="XX", country_code=-1)])


def test_decoded_records_are_hashable() -> None:
    (record,) = decode_collection(encode_collection([_us_record()]))
    assert hash(record) == hash(_us_record())
    assert len({record, _us_record()}) == 1
