"""
Decoding of status/message/details envelopes with a caller-supplied payload decoder.

The envelope code never inspects the payload shape: `details` is handed as-is
to the decoder, and anything the decoder raises reaches the caller untouched.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Union

from typed_envelope.core.config import settings
from typed_envelope.models.common import Decoder, T
from typed_envelope.models.envelope import Envelope, EnvelopeKeys
from typed_envelope.utils.errors import MalformedEnvelope, MalformedPayload

logger = logging.getLogger("typed_envelope.decoder")


def _optional_str(raw: Mapping[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None or isinstance(value, str):
        return value
    raise MalformedEnvelope(
        f"'{key}' must be a string or null, got {type(value).__name__}",
        field=key,
    )


def decode_envelope(
    raw: Any,
    decoder: Decoder[T],
    *,
    keys: Optional[EnvelopeKeys] = None,
) -> Envelope[T]:
    """
    Build an Envelope from a parsed JSON object.

    `decoder` runs at most once, only on the `details` sub-value, and only when
    that value is present and non-null.
    """

    if not isinstance(raw, Mapping):
        raise MalformedEnvelope(f"envelope must be a JSON object, got {type(raw).__name__}")
    keys = keys or settings.envelope_keys()

    status = _optional_str(raw, keys.status)
    message = _optional_str(raw, keys.message)

    raw_details = raw.get(keys.details)
    if raw_details is None:
        logger.debug("Envelope status=%r has no details; decoder skipped", status)
        return Envelope(status=status, message=message, details=None)

    details = decoder(raw_details)
    if details is None:
        raise MalformedPayload(
            f"decoder {getattr(decoder, '__name__', repr(decoder))} returned None for non-null '{keys.details}'"
        )
    logger.debug("Envelope status=%r decoded details as %s", status, type(details).__name__)
    return Envelope(status=status, message=message, details=details)


def decode_envelope_list(raw_list: Any, decoder: Decoder[T]) -> List[T]:
    """Decode every element in order; the first failure aborts the whole list."""

    if not isinstance(raw_list, (list, tuple)):
        raise MalformedPayload(f"expected a JSON array, got {type(raw_list).__name__}")

    items: List[T] = []
    for index, element in enumerate(raw_list):
        try:
            items.append(decoder(element))
        except Exception as exc:
            logger.debug("List element %s failed to decode: %s", index, exc)
            raise MalformedPayload.at_index(index, exc) from exc
    return items


def decode_envelope_json(
    text: Union[str, bytes],
    decoder: Decoder[T],
    *,
    keys: Optional[EnvelopeKeys] = None,
) -> Envelope[T]:
    """Parse UTF-8 JSON text and decode it as an envelope."""

    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise MalformedEnvelope(f"invalid JSON: {exc}") from exc
    return decode_envelope(raw, decoder, keys=keys)
