"""Timestamp Codec — maps wire mappings to Timestamp values and back.

Invariants:
    - decode_timestamp either returns a valid Timestamp or raises
      MalformedTimestampPayloadError with the underlying error chained
    - encode_timestamp writes seconds/nanos verbatim, no rounding
    - Rejections logged at WARNING with error_code and field extras

Design Decisions:
    - Range errors from the wire are re-raised as boundary errors: bad server data
      is not a local programmer error, but it is still never clamped
    - Logging wrapped around pure calls only; core/ stays log-free
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from wirestamp.core.errors import MalformedTimestampPayloadError, TimestampRangeError
from wirestamp.core.timestamp import Timestamp
from wirestamp.schemas.timestamp import TimestampPayload

logger = logging.getLogger(__name__)


def encode_timestamp(timestamp: Timestamp) -> dict[str, int]:
    """Serialize a Timestamp into the {seconds, nanos} wire mapping."""
    return TimestampPayload.from_timestamp(timestamp).model_dump()


def decode_timestamp(data: Mapping[str, Any]) -> Timestamp:
    """Deserialize a {seconds, nanos} wire mapping through the validated constructor."""
    if not isinstance(data, Mapping):
        logger.warning(
            f"Rejected timestamp payload: not a mapping ({type(data).__name__})",
            extra={"error_code": "MALFORMED_TIMESTAMP_PAYLOAD"},
        )
        raise MalformedTimestampPayloadError("payload is not a mapping")

    try:
        payload = TimestampPayload.model_validate(dict(data))
    except ValidationError as e:
        field = _first_error_field(e)
        logger.warning(
            f"Rejected timestamp payload: {e.error_count()} validation error(s)",
            extra={"error_code": "MALFORMED_TIMESTAMP_PAYLOAD", "field": field},
        )
        raise MalformedTimestampPayloadError(
            f"schema validation failed on '{field}'", field=field,
        ) from e

    try:
        return payload.to_timestamp()
    except TimestampRangeError as e:
        field = "nanos" if e.field == "nanoseconds" else e.field
        logger.warning(
            f"Rejected timestamp payload: {e.message}",
            extra={"error_code": e.code, "field": field},
        )
        raise MalformedTimestampPayloadError(e.message, field=field) from e


def _first_error_field(error: ValidationError) -> str | None:
    errors = error.errors()
    if not errors or not errors[0].get("loc"):
        return None
    return str(errors[0]["loc"][0])
