"""Timestamp Codec — encode/decode at the wire boundary.

Tests cover:
    - encode writes seconds/nanos verbatim
    - decode routes through the validated constructor
    - schema failures, range failures, and non-mappings raise
      MalformedTimestampPayloadError with the cause chained
    - every rejection is logged at WARNING with error_code and field
"""

import logging

import pytest
from pydantic import ValidationError

from wirestamp.core.errors import MalformedTimestampPayloadError, TimestampRangeError
from wirestamp.core.timestamp import Timestamp
from wirestamp.services.timestamp_codec import decode_timestamp, encode_timestamp

CODEC_LOGGER = "wirestamp.services.timestamp_codec"


def test_encode_writes_fields_verbatim():
    assert encode_timestamp(Timestamp(-1, 750_000_000)) == {"seconds": -1, "nanos": 750_000_000}


def test_decode_returns_validated_timestamp():
    assert decode_timestamp({"seconds": 6, "nanos": 0}) == Timestamp(6, 0)


def test_decode_of_encoded_latest_instant():
    latest = Timestamp(253402300799, 999_999_999)
    assert decode_timestamp(encode_timestamp(latest)) == latest


def test_decode_out_of_range_nanos_raises_and_logs(caplog):
    with caplog.at_level(logging.WARNING, logger=CODEC_LOGGER):
        with pytest.raises(MalformedTimestampPayloadError) as exc_info:
            decode_timestamp({"seconds": 0, "nanos": 1_000_000_000})
    err = exc_info.value
    assert err.field == "nanos"
    assert isinstance(err.__cause__, TimestampRangeError)
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.error_code == "TIMESTAMP_OUT_OF_RANGE"
    assert record.field == "nanos"


def test_decode_out_of_range_seconds_reports_seconds_field(caplog):
    with caplog.at_level(logging.WARNING, logger=CODEC_LOGGER):
        with pytest.raises(MalformedTimestampPayloadError) as exc_info:
            decode_timestamp({"seconds": -62135596801, "nanos": 0})
    assert exc_info.value.field == "seconds"
    assert caplog.records[-1].field == "seconds"


def test_decode_schema_failure_chains_validation_error(caplog):
    with caplog.at_level(logging.WARNING, logger=CODEC_LOGGER):
        with pytest.raises(MalformedTimestampPayloadError) as exc_info:
            decode_timestamp({"seconds": "not-a-number", "nanos": 0})
    assert exc_info.value.field == "seconds"
    assert isinstance(exc_info.value.__cause__, ValidationError)
    assert caplog.records[-1].error_code == "MALFORMED_TIMESTAMP_PAYLOAD"


def test_decode_unknown_key_names_that_key():
    with pytest.raises(MalformedTimestampPayloadError) as exc_info:
        decode_timestamp({"seconds": 0, "nanos": 0, "zone": "UTC"})
    assert exc_info.value.field == "zone"


def test_decode_rejects_non_mapping(caplog):
    with caplog.at_level(logging.WARNING, logger=CODEC_LOGGER):
        with pytest.raises(MalformedTimestampPayloadError):
            decode_timestamp([("seconds", 0), ("nanos", 0)])
    assert "not a mapping" in caplog.records[-1].getMessage()


def test_decode_success_does_not_log(caplog):
    with caplog.at_level(logging.DEBUG, logger=CODEC_LOGGER):
        decode_timestamp({"seconds": 1, "nanos": 1})
    assert caplog.records == []


@pytest.mark.parametrize("data,field", [
    ({"seconds": True, "nanos": False}, "seconds"),
    ({"seconds": 0, "nanos": True}, "nanos"),
    ({"seconds": 1.0, "nanos": 0}, "seconds"),
    ({"seconds": 0, "nanos": 5.0}, "nanos"),
    ({"seconds": 0, "nanos": "5"}, "nanos"),
])
def test_decode_rejects_non_integer_fields(data, field):
    with pytest.raises(MalformedTimestampPayloadError) as exc_info:
        decode_timestamp(data)
    assert exc_info.value.field == field
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_decode_accepts_int64_string_seconds():
    assert decode_timestamp({"seconds": "-1", "nanos": 750_000_000}) == Timestamp(-1, 750_000_000)
